"""Area-uniform barycentric coordinates and barycentric interpolation."""
from __future__ import annotations

import numpy as np


def barycentric_from_uniform(u: np.ndarray, v: np.ndarray) -> np.ndarray:
    """
    Map two independent U(0,1) arrays to barycentric weights that are
    uniform over the triangle area.

    Uses the classic trick:
      su = sqrt(u)
      w0 = 1 - su
      w1 = su * (1 - v)
      w2 = su * v

    returns: (n,3), rows sum to 1, entries in [0,1]
    """
    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    su = np.sqrt(u)

    w0 = 1.0 - su
    w1 = su * (1.0 - v)
    w2 = su * v
    return np.stack([w0, w1, w2], axis=-1)


def interpolate_on_triangles(
    values: np.ndarray,
    faces: np.ndarray,
    face_ids: np.ndarray,
    barycentric: np.ndarray,
) -> np.ndarray:
    """
    Barycentric interpolation of any per-vertex values.

    values:      (N,) or (N,k) per-vertex data (positions, normals, colors, uv ...)
    faces:       (M,3)
    face_ids:    (n,)
    barycentric: (n,3)
    returns:     (n,) or (n,k)
    """
    values = np.asarray(values)
    corners = faces[face_ids]
    w = barycentric if values.ndim == 1 else barycentric[:, :, None]
    return np.sum(w * values[corners], axis=1)
