from .registry import get_network
from .ring_lattice import RingLatticeParams, ring_lattice
from .rewire import rewire
from .watts_strogatz import WattsStrogatzParams, watts_strogatz

__all__ = [
    "get_network",
    "RingLatticeParams",
    "WattsStrogatzParams",
    "ring_lattice",
    "rewire",
    "watts_strogatz",
]
