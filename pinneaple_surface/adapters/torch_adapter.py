"""Torch conversion of surface samples and sampling operators (PINN collocation)."""
from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import scipy.sparse as sp


def samples_to_torch(
    B: np.ndarray,
    FI: np.ndarray,
    X: Optional[np.ndarray] = None,
    *,
    device: Optional[Any] = None,
    dtype: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Pack sampler outputs as torch tensors.

    Returns dict:
      "bary":    (n,3) float tensor
      "face_id": (n,) int64 tensor
      "x":       (n,d) float tensor (only if X is given)
    """
    import torch

    dtype = dtype or torch.float32
    out = {
        "bary": torch.as_tensor(np.asarray(B), dtype=dtype, device=device),
        "face_id": torch.as_tensor(np.asarray(FI), dtype=torch.int64, device=device),
    }
    if X is not None:
        out["x"] = torch.as_tensor(np.asarray(X), dtype=dtype, device=device)
    return out


def operator_to_torch(
    S: sp.spmatrix,
    *,
    device: Optional[Any] = None,
    dtype: Optional[Any] = None,
):
    """
    scipy sparse sampling operator -> coalesced torch.sparse_coo_tensor.

    torch.sparse.mm(S_t, V_t) then samples per-vertex tensors (including
    ones that require grad) at the drawn surface points.
    """
    import torch

    dtype = dtype or torch.float32
    coo = sp.coo_matrix(S)
    idx = torch.as_tensor(np.vstack([coo.row, coo.col]).astype(np.int64), device=device)
    val = torch.as_tensor(coo.data, dtype=dtype, device=device)
    return torch.sparse_coo_tensor(idx, val, size=coo.shape, device=device).coalesce()
