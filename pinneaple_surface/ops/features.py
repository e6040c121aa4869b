"""Face areas (any dimension), surface area, and face/vertex normals (3-D)."""
from __future__ import annotations

import numpy as np

from pinneaple_surface.core.mesh import MeshData
from pinneaple_surface.errors import InvalidMeshError


def compute_face_areas(mesh: MeshData) -> np.ndarray:
    """
    Compute triangle face areas (M,).

    Uses the cross product magnitude in 2-D and 3-D. Above that the
    magnitude of the wedge product e1 ^ e2 is taken from its 2x2 minors,
    sqrt(sum_{i<j} (e1_i e2_j - e1_j e2_i)^2), which reduces to |e1 x e2|
    in 3-D and stays accurate on slivers.
    Degenerate triangles (collinear or repeated corners) get exactly 0.
    """
    p0, p1, p2 = mesh.triangle_corners()
    e1 = p1 - p0
    e2 = p2 - p0

    d = mesh.dim
    if d == 2:
        cross = e1[:, 0] * e2[:, 1] - e1[:, 1] * e2[:, 0]
        return 0.5 * np.abs(cross)
    if d == 3:
        return 0.5 * np.linalg.norm(np.cross(e1, e2), axis=1)

    outer = e1[:, :, None] * e2[:, None, :]
    minors = outer - np.swapaxes(outer, 1, 2)
    iu = np.triu_indices(d, k=1)
    return 0.5 * np.sqrt(np.sum(minors[:, iu[0], iu[1]] ** 2, axis=1))


def surface_area(mesh: MeshData) -> float:
    return float(np.sum(compute_face_areas(mesh)))


def _require_3d(mesh: MeshData, what: str) -> None:
    if mesh.dim != 3:
        raise InvalidMeshError(f"{what} requires a 3-D mesh, got d={mesh.dim}")


def compute_face_normals(mesh: MeshData) -> np.ndarray:
    """
    Compute unit face normals (M,3). Degenerate faces get a zero normal.
    """
    _require_3d(mesh, "face normals")
    p0, p1, p2 = mesh.triangle_corners()

    n = np.cross(p1 - p0, p2 - p0)
    norm = np.linalg.norm(n, axis=1, keepdims=True)
    norm[norm == 0] = 1.0
    return n / norm


def compute_vertex_normals(mesh: MeshData) -> np.ndarray:
    """
    Compute vertex normals (N,3) by area-weighted face normals.

    The unnormalized cross product already carries twice the face area,
    so it is accumulated directly.
    """
    _require_3d(mesh, "vertex normals")
    p0, p1, p2 = mesh.triangle_corners()
    fn = np.cross(p1 - p0, p2 - p0)

    vn = np.zeros_like(mesh.vertices)
    for i in range(3):
        np.add.at(vn, mesh.faces[:, i], fn)

    norm = np.linalg.norm(vn, axis=1, keepdims=True)
    norm[norm == 0] = 1.0
    return vn / norm
