"""Cumulative distribution over face weights for weighted face selection."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pinneaple_surface.errors import InvalidArgumentError


@dataclass(frozen=True)
class CumulativeDistribution:
    """
    Running sum of per-face weights.

    cumsum[i] = weights[0] + ... + weights[i], shape (M,).
    Built once from a weight array and never updated in place.
    """
    cumsum: np.ndarray

    @property
    def n_bins(self) -> int:
        return int(self.cumsum.shape[0])

    @property
    def total(self) -> float:
        return float(self.cumsum[-1]) if self.cumsum.size else 0.0

    @property
    def last_positive(self) -> int:
        """Index of the last bin with non-zero weight (-1 if none)."""
        if self.total <= 0:
            return -1
        return int(np.searchsorted(self.cumsum, self.total, side="left"))

    def locate(self, r: np.ndarray) -> np.ndarray:
        """
        Smallest i with cumsum[i] > r, for each r in [0, total).

        Binary search, O(log M) per value. Zero-weight bins are never
        returned; r == total (float round-off of u * total) maps to the
        last non-empty bin.
        """
        if self.total <= 0:
            raise InvalidArgumentError("cannot locate values in a distribution with zero total weight")
        idx = np.searchsorted(self.cumsum, np.asarray(r, dtype=np.float64), side="right")
        return np.minimum(idx, self.last_positive).astype(np.int64)


def validate_weights(weights: np.ndarray) -> np.ndarray:
    w = np.asarray(weights, dtype=np.float64)
    if w.ndim != 1:
        raise InvalidArgumentError(f"weights must be 1-D, got shape {w.shape}")
    if not np.all(np.isfinite(w)):
        raise InvalidArgumentError("weights must be finite")
    if np.any(w < 0):
        raise InvalidArgumentError("weights must be non-negative")
    return w


def build_cumulative_distribution(weights: np.ndarray) -> CumulativeDistribution:
    """
    O(M) running sum over non-negative weights (M,).
    """
    w = validate_weights(weights)
    cdf = np.cumsum(w)
    cdf.setflags(write=False)
    return CumulativeDistribution(cumsum=cdf)
