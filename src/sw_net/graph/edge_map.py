import numpy as np
from scipy import sparse


class EdgeMap:
    """Editable sparse adjacency keyed by ``(row, col)``.

    Only non-zero weights are stored; writing a zero removes the entry.
    Used as the working copy while rewiring, then converted back to CSR.
    """

    def __init__(self, n: int, weights: dict[tuple[int, int], float] | None = None):
        if n < 1:
            raise ValueError("n must be >= 1")
        self.n = int(n)
        self._weights: dict[tuple[int, int], float] = dict(weights or {})

    @classmethod
    def from_sparse(cls, graph: sparse.spmatrix) -> "EdgeMap":
        n_rows, n_cols = graph.shape
        if n_rows != n_cols:
            raise ValueError(f"Adjacency matrix must be square, got shape {graph.shape}")
        coo = sparse.coo_matrix(graph, copy=True)
        coo.sum_duplicates()
        weights = {
            (int(r), int(c)): float(w)
            for r, c, w in zip(coo.row, coo.col, coo.data)
            if w != 0
        }
        return cls(n_rows, weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, key: tuple[int, int]) -> bool:
        return key in self._weights

    def get(self, i: int, j: int) -> float:
        return self._weights.get((i, j), 0.0)

    def add(self, i: int, j: int, w: float) -> None:
        if w == 0:
            return
        total = self._weights.get((i, j), 0.0) + w
        if total == 0:
            self._weights.pop((i, j), None)
        else:
            self._weights[(i, j)] = total

    def pop(self, i: int, j: int) -> float:
        """Zero out ``(i, j)`` and return the weight it held."""
        return self._weights.pop((i, j), 0.0)

    def total_weight(self) -> float:
        return float(sum(self._weights.values()))

    def to_csr(self) -> sparse.csr_matrix:
        m = len(self._weights)
        rows = np.empty(m, dtype=np.int64)
        cols = np.empty(m, dtype=np.int64)
        data = np.empty(m, dtype=float)
        for idx, ((r, c), w) in enumerate(self._weights.items()):
            rows[idx] = r
            cols[idx] = c
            data[idx] = w
        A = sparse.csr_matrix((data, (rows, cols)), shape=(self.n, self.n))
        A.sort_indices()
        return A
