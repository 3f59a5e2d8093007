"""Ring lattices and Watts-Strogatz rewiring on sparse adjacency matrices."""

from .errors import Cancelled, InvalidDegree, InvalidProbability, SwNetError
from .graph import EdgeMap, edge_coordinates
from .networks import (
    RingLatticeParams,
    WattsStrogatzParams,
    get_network,
    rewire,
    ring_lattice,
    watts_strogatz,
)
from .utils.cancellation import CancellationToken
from .utils.random_source import RandomSource

__all__ = [
    "Cancelled",
    "CancellationToken",
    "EdgeMap",
    "InvalidDegree",
    "InvalidProbability",
    "RandomSource",
    "RingLatticeParams",
    "SwNetError",
    "WattsStrogatzParams",
    "edge_coordinates",
    "get_network",
    "rewire",
    "ring_lattice",
    "watts_strogatz",
]
