import numpy as np
from scipy import sparse


def total_weight(A: sparse.spmatrix) -> float:
    return float(A.sum())


def out_degree(A: sparse.spmatrix) -> np.ndarray:
    return np.asarray(A.sum(axis=1)).ravel()


def in_degree(A: sparse.spmatrix) -> np.ndarray:
    return np.asarray(A.sum(axis=0)).ravel()


def is_symmetric(A: sparse.spmatrix) -> bool:
    diff = sparse.csr_matrix(A - A.T)
    diff.eliminate_zeros()
    return diff.nnz == 0


def count_self_loops(A: sparse.spmatrix) -> int:
    return int(np.count_nonzero(A.diagonal()))


def count_multi_edges(A: sparse.spmatrix) -> int:
    """Number of stored positions whose weight is neither 0 nor 1."""
    csr = sparse.csr_matrix(A, copy=True)
    csr.sum_duplicates()
    return int(np.count_nonzero((csr.data != 0) & (csr.data != 1)))


def check_graph(
    A: sparse.spmatrix,
    *,
    undirected: bool = False,
    allow_self: bool = True,
    allow_multiple: bool = True,
) -> list[str]:
    """Check ``A`` against the structural policies of a generated graph.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []
    if A.shape[0] != A.shape[1]:
        errors.append(f"Adjacency matrix is not square: shape {A.shape}")
        return errors

    csr = sparse.csr_matrix(A)
    if csr.nnz and csr.data.min() < 0:
        errors.append("Negative edge weights found")
    if undirected and not is_symmetric(csr):
        errors.append("Adjacency matrix is not symmetric")
    if not allow_self:
        loops = count_self_loops(csr)
        if loops:
            errors.append(f"Self-loops detected: {loops} diagonal entries")
    if not allow_multiple:
        multi = count_multi_edges(csr)
        if multi:
            errors.append(f"Multi-edges detected: {multi} entries with weight != 1")
    return errors


def summarize(A: sparse.spmatrix, *, undirected: bool = False) -> dict:
    csr = sparse.csr_matrix(A, copy=True)
    csr.eliminate_zeros()
    degrees = out_degree(csr)
    return {
        "n": int(csr.shape[0]),
        "edges": int(csr.nnz),
        "total_weight": total_weight(csr),
        "symmetric": is_symmetric(csr),
        "self_loops": count_self_loops(csr),
        "multi_edges": count_multi_edges(csr),
        "mean_degree": float(degrees.mean()) if degrees.size else 0.0,
        "min_degree": float(degrees.min()) if degrees.size else 0.0,
        "max_degree": float(degrees.max()) if degrees.size else 0.0,
        "undirected": bool(undirected),
    }
