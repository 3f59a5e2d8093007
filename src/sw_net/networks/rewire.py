"""Per-edge stochastic rewiring with rejection sampling of the new endpoint.

Every stored edge is visited once, in the column-major order of the input's
non-zero entries. With probability ``p`` its right endpoint (and, with
``both_ends``, also its left endpoint) is moved to a uniformly drawn vertex
that respects the self-loop, multi-edge and undirected policies. The weight
of the edge moves with it, so the total weight of the graph is conserved.
"""

import logging
import math

import numpy as np
from scipy import sparse

from sw_net.errors import InvalidProbability
from sw_net.graph import EdgeMap, edge_coordinates
from sw_net.utils.cancellation import CancellationToken
from sw_net.utils.random_source import RandomSource, as_random_source

log = logging.getLogger(__name__)

# Edges processed between two cancellation checks.
CANCEL_CHECK_EVERY = 1000


def check_probability(p: float) -> float:
    p = float(p)
    if math.isnan(p) or p < 0.0 or p > 1.0:
        raise InvalidProbability(f"p must be in [0, 1], got {p}")
    return p


def _draw_endpoint(
    rng: np.random.Generator,
    edges: EdgeMap,
    newj: int,
    *,
    allow_self: bool,
    allow_multiple: bool,
    undirected: bool,
) -> int | None:
    """Rejection-sample a valid right endpoint for an edge leaving ``newj``.

    Returns ``None`` when no candidate is found: either every vertex has been
    tried, or ``n**2`` draws have been spent.
    """
    n = edges.n
    tried: set[int] = set()
    for _ in range(n * n):
        newk = int(rng.integers(n))
        if newk in tried:
            continue
        tried.add(newk)

        valid = not (
            (undirected and newj < newk)
            or (not allow_self and newj == newk)
            or (not allow_multiple and (newj, newk) in edges)
        )
        if valid:
            return newk
        # Validity does not change during the search, so once every vertex
        # has been rejected there is nothing left to find.
        if len(tried) == n:
            break
    return None


def rewire(
    graph: sparse.spmatrix,
    p: float,
    both_ends: bool = False,
    allow_self: bool = False,
    allow_multiple: bool = False,
    undirected: bool = False,
    *,
    rng: RandomSource | np.random.Generator | None = None,
    seed: int | None = None,
    cancel: CancellationToken | None = None,
) -> sparse.csr_matrix:
    """Randomly relocate the edges of ``graph`` and return the rewired copy.

    Args:
        graph: Square sparse adjacency matrix. It is not modified.
        p: Per-edge rewiring probability in [0, 1].
        both_ends: Also redraw the left endpoint of a rewired edge.
        allow_self: Accept self-loops as new edges.
        allow_multiple: Accept new edges onto already occupied positions; the
            weights are then added.
        undirected: Treat ``graph`` as symmetric. Each edge is handled once,
            through the entry with the larger row index, and every write is
            mirrored.
        rng: Random source used for all draws. Defaults to a fresh source
            seeded with ``seed``.
        seed: Seed for the default random source.
        cancel: Token polled every ``CANCEL_CHECK_EVERY`` edges.

    Raises:
        InvalidProbability: if ``p`` is outside [0, 1].
        Cancelled: if ``cancel`` is set while rewiring.
    """
    p = check_probability(p)
    if graph.ndim != 2 or graph.shape[0] != graph.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {graph.shape}")

    indexes = edge_coordinates(graph)
    edges = EdgeMap.from_sparse(graph)
    source = as_random_source(rng, seed)

    moved = 0
    abandoned = 0
    with source.acquire() as gen:
        for i, (j, k) in enumerate(indexes.tolist()):
            if cancel is not None and i % CANCEL_CHECK_EVERY == 0:
                cancel.raise_if_cancelled()

            if gen.random() >= p:
                continue
            if undirected and j < k:
                continue

            newj = int(gen.integers(edges.n)) if both_ends else j
            newk = _draw_endpoint(
                gen,
                edges,
                newj,
                allow_self=allow_self,
                allow_multiple=allow_multiple,
                undirected=undirected,
            )
            if newk is None:
                abandoned += 1
                log.debug("No valid endpoint for edge (%d, %d); left in place", j, k)
                continue

            w = edges.pop(j, k)
            if undirected and j != k:
                w += edges.pop(k, j)
            if undirected and newj != newk:
                edges.add(newj, newk, w / 2)
                edges.add(newk, newj, w / 2)
            else:
                edges.add(newj, newk, w)
            moved += 1

    log.info(
        "Rewired %d of %d stored edges (p=%.3f, abandoned=%d)",
        moved,
        len(indexes),
        p,
        abandoned,
    )
    return edges.to_csr()
