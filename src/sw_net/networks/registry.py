from typing import Any

from .ring_lattice import RingLatticeParams, build as rl_build
from .watts_strogatz import WattsStrogatzParams, build as ws_build

_REGISTRY = {
    "ring_lattice": (rl_build, RingLatticeParams),
    "watts_strogatz": (ws_build, WattsStrogatzParams),
}


def get_network(name: str, params: dict[str, Any]):
    if name not in _REGISTRY:
        raise ValueError(f"Unknown network '{name}'. Available: {list(_REGISTRY)}")
    build, Params = _REGISTRY[name]
    p = Params.model_validate(params)
    return build, p
