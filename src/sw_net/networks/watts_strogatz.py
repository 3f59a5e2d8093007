import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from scipy import sparse

from sw_net.networks.ring_lattice import ring_lattice
from sw_net.networks.rewire import rewire
from sw_net.utils.cancellation import CancellationToken
from sw_net.utils.random_source import RandomSource


class WattsStrogatzParams(BaseModel):
    model_config = ConfigDict(extra="forbid")
    n: int = Field(..., ge=1)
    k: int = Field(2, ge=0)
    p: float = Field(0.1, ge=0.0, le=1.0)
    both_ends: bool = False
    allow_self: bool = False
    allow_multiple: bool = False
    undirected: bool = True
    seed: int | None = None


def watts_strogatz(
    n: int,
    k: int,
    p: float,
    both_ends: bool = False,
    allow_self: bool = False,
    allow_multiple: bool = False,
    undirected: bool = True,
    *,
    seed: int | None = None,
    rng: RandomSource | np.random.Generator | None = None,
    cancel: CancellationToken | None = None,
) -> sparse.csr_matrix:
    """Small-world graph: a ring lattice whose edges are rewired with probability ``p``."""
    lattice = ring_lattice(n, k, undirected=undirected)
    return rewire(
        lattice,
        p,
        both_ends=both_ends,
        allow_self=allow_self,
        allow_multiple=allow_multiple,
        undirected=undirected,
        rng=rng,
        seed=seed,
        cancel=cancel,
    )


def build(p: WattsStrogatzParams) -> sparse.csr_matrix:
    return watts_strogatz(
        p.n,
        p.k,
        p.p,
        both_ends=p.both_ends,
        allow_self=p.allow_self,
        allow_multiple=p.allow_multiple,
        undirected=p.undirected,
        seed=p.seed,
    )
