"""Sparse matrix helpers: COO triplet builder and diagonal inversion."""
from __future__ import annotations

from typing import List, Tuple

import numpy as np
import scipy.sparse as sp

from pinneaple_surface.errors import InvalidArgumentError


class TripletBuilder:
    """
    Collects (row, col, value) triplets and finalizes them into one sparse
    matrix. Duplicate (row, col) pairs are summed on finalize.

    The builder can be finalized only once; the result is the only thing
    callers keep around.
    """

    def __init__(self, shape: Tuple[int, int]):
        n_rows, n_cols = (int(s) for s in shape)
        if n_rows < 0 or n_cols < 0:
            raise InvalidArgumentError(f"shape must be non-negative, got {shape}")
        self.shape = (n_rows, n_cols)
        self._rows: List[np.ndarray] = []
        self._cols: List[np.ndarray] = []
        self._vals: List[np.ndarray] = []
        self._finalized = False

    def add(self, rows, cols, values) -> "TripletBuilder":
        """
        Append a block of triplets. rows/cols/values broadcast to one shape.
        """
        if self._finalized:
            raise RuntimeError("TripletBuilder was already finalized")
        r, c, v = np.broadcast_arrays(
            np.asarray(rows, dtype=np.int64),
            np.asarray(cols, dtype=np.int64),
            np.asarray(values, dtype=np.float64),
        )
        r, c, v = r.ravel(), c.ravel(), v.ravel()
        if r.size:
            if r.min() < 0 or r.max() >= self.shape[0] or c.min() < 0 or c.max() >= self.shape[1]:
                raise InvalidArgumentError(f"triplet index outside matrix shape {self.shape}")
        self._rows.append(r)
        self._cols.append(c)
        self._vals.append(v)
        return self

    def __len__(self) -> int:
        return int(sum(r.size for r in self._rows))

    def finalize(self, fmt: str = "csr") -> sp.spmatrix:
        if self._finalized:
            raise RuntimeError("TripletBuilder was already finalized")
        self._finalized = True

        if self._rows:
            rows = np.concatenate(self._rows)
            cols = np.concatenate(self._cols)
            vals = np.concatenate(self._vals)
        else:
            rows = cols = np.zeros((0,), dtype=np.int64)
            vals = np.zeros((0,), dtype=np.float64)
        self._rows, self._cols, self._vals = [], [], []

        coo = sp.coo_matrix((vals, (rows, cols)), shape=self.shape)
        if fmt == "coo":
            coo.sum_duplicates()
            return coo
        if fmt == "csc":
            return coo.tocsc()
        if fmt == "csr":
            return coo.tocsr()
        raise InvalidArgumentError(f"Unknown sparse format '{fmt}'. Available: ['csr', 'csc', 'coo']")


def invert_diag(X) -> sp.csr_matrix:
    """
    Invert the diagonal entries of a matrix.

    Returns a matrix of the same shape holding 1/d at (i,i) where the input
    diagonal entry d is non-zero and 0 where it is zero. Off-diagonal
    entries are dropped, so for a diagonal matrix this is its inverse.
    """
    if sp.issparse(X):
        d = np.asarray(X.diagonal(), dtype=np.float64)
    else:
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2:
            raise InvalidArgumentError(f"invert_diag expects a 2-D matrix, got shape {X.shape}")
        d = np.diagonal(X).astype(np.float64)

    if d.size == 0:
        return sp.csr_matrix(X.shape, dtype=np.float64)

    inv = np.zeros_like(d)
    nz = d != 0
    inv[nz] = 1.0 / d[nz]

    Y = sp.diags(inv, 0, shape=X.shape, format="csr")
    Y.eliminate_zeros()
    return Y
