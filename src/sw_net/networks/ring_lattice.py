import logging

import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from scipy import sparse

from sw_net.errors import InvalidDegree

log = logging.getLogger(__name__)


class RingLatticeParams(BaseModel):
    model_config = ConfigDict(extra="forbid")
    n: int = Field(..., ge=1)
    k: int = Field(2, ge=0)
    undirected: bool = False


def effective_degree(k: int, undirected: bool) -> int:
    # Each placement is mirrored when undirected, so only half the offsets are used.
    if undirected and k > 1:
        return k // 2
    return k


def ring_lattice(n: int, k: int, undirected: bool = False) -> sparse.csr_matrix:
    """Build a ring lattice on ``n`` vertices.

    Vertex ``i`` is connected to ``(i + j) mod n`` for ``j = 1..k``. When
    ``undirected`` is set, ``k`` is halved (for ``k > 1``) and every arc is
    mirrored, so each vertex ends up with ``2 * (k // 2)`` neighbours, half on
    each side. Weights count edge multiplicity.

    Raises:
        InvalidDegree: if ``k`` is negative or larger than ``n - 1``.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    if k > n - 1:
        raise InvalidDegree(f"k can be at most n - 1 (got k={k}, n={n})")
    if k < 0:
        raise InvalidDegree(f"k must be non-negative (got k={k})")

    k_eff = effective_degree(k, undirected)
    rows = np.repeat(np.arange(n, dtype=np.int64), k_eff)
    offsets = np.tile(np.arange(1, k_eff + 1, dtype=np.int64), n)
    cols = (rows + offsets) % n
    if undirected:
        rows, cols = np.concatenate([rows, cols]), np.concatenate([cols, rows])
    data = np.ones(rows.size, dtype=float)

    # Duplicate coordinates are summed, which is the increment-by-one rule.
    A = sparse.csr_matrix((data, (rows, cols)), shape=(n, n))
    A.sum_duplicates()
    log.debug(
        "Built ring lattice (n=%d, k=%d, k_effective=%d, undirected=%s, edges=%d)",
        n,
        k,
        k_eff,
        undirected,
        A.nnz,
    )
    return A


def build(p: RingLatticeParams) -> sparse.csr_matrix:
    return ring_lattice(p.n, p.k, undirected=p.undirected)
