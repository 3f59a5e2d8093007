import numpy as np
from scipy import sparse


def edge_coordinates(graph: sparse.spmatrix) -> np.ndarray:
    """Return the (row, col) positions of the non-zero entries of ``graph``.

    The result is an ``(m, 2)`` int64 array, ordered column-major (by column,
    then row). It is a snapshot: later writes to ``graph`` do not affect it.
    Explicitly stored zeros are dropped.
    """
    csc = sparse.csc_matrix(graph, copy=True)
    csc.sum_duplicates()
    csc.eliminate_zeros()
    coo = csc.tocoo()
    return np.column_stack((coo.row, coo.col)).astype(np.int64, copy=False)
