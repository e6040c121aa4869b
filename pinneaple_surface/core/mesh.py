"""MeshData container for triangle meshes in any ambient dimension d >= 2."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import hashlib

import numpy as np

from pinneaple_surface.errors import InvalidMeshError


@dataclass
class MeshData:
    """
    Lightweight triangle mesh container (numpy-only).

    vertices: (N,d) float64, d >= 2
    faces:    (M,3) int64, every entry in [0, N)
    normals:  (M,3) or (N,3), optional (3-D meshes only)

    The sampling code only reads from a MeshData; it never modifies the
    arrays it was given.
    """
    vertices: np.ndarray
    faces: np.ndarray
    normals: Optional[np.ndarray] = None

    # =====================================================
    # Init / validation
    # =====================================================
    def __post_init__(self):
        try:
            self.vertices = np.ascontiguousarray(self.vertices, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidMeshError(f"vertices are not a numeric array: {e}") from e

        faces = np.asarray(self.faces)
        if faces.size == 0:
            faces = faces.reshape(-1, 3) if faces.ndim != 2 else faces
        elif not np.issubdtype(faces.dtype, np.integer):
            if not np.issubdtype(faces.dtype, np.number) or np.any(faces != np.round(faces)):
                raise InvalidMeshError("faces must hold integer vertex indices")
        self.faces = np.ascontiguousarray(faces, dtype=np.int64)

        if self.normals is not None:
            self.normals = np.ascontiguousarray(self.normals, dtype=np.float64)
        self._validate()

    def _validate(self):
        if self.vertices.ndim != 2 or self.vertices.shape[1] < 2:
            raise InvalidMeshError(f"vertices must be shape (N,d) with d >= 2, got {self.vertices.shape}")
        if not np.all(np.isfinite(self.vertices)):
            raise InvalidMeshError("vertices must be finite (found NaN or inf)")
        if self.faces.ndim != 2 or self.faces.shape[1] != 3:
            raise InvalidMeshError(f"faces must be shape (M,3), got {self.faces.shape}")
        if self.faces.size and (np.any(self.faces < 0) or np.any(self.faces >= self.vertices.shape[0])):
            bad = np.nonzero(np.any((self.faces < 0) | (self.faces >= self.vertices.shape[0]), axis=1))[0]
            raise InvalidMeshError(
                f"faces contain vertex indices outside [0, {self.n_vertices}) "
                f"(first offending face: {int(bad[0])})"
            )
        if self.normals is not None:
            if self.normals.ndim != 2 or self.normals.shape[1] != self.dim:
                raise InvalidMeshError(f"normals must be shape (K,{self.dim})")
            if self.normals.shape[0] not in (self.n_faces, self.n_vertices):
                raise InvalidMeshError(f"normals must be (M,{self.dim}) (face) or (N,{self.dim}) (vertex)")

    # =====================================================
    # Basic properties
    # =====================================================
    @property
    def n_vertices(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def n_faces(self) -> int:
        return int(self.faces.shape[0])

    @property
    def dim(self) -> int:
        return int(self.vertices.shape[1])

    def triangle_corners(self, face_ids: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Corner positions (p0, p1, p2) of the selected faces, each (K,d).
        All faces when face_ids is None.
        """
        f = self.faces if face_ids is None else self.faces[face_ids]
        v = self.vertices
        return v[f[:, 0]], v[f[:, 1]], v[f[:, 2]]

    # =====================================================
    # Hashing / caching
    # =====================================================
    def fingerprint(self) -> str:
        payload = (
            str(self.vertices.shape).encode("utf-8") +
            str(self.vertices.dtype).encode("utf-8") +
            self.vertices.tobytes(order="C") +
            str(self.faces.shape).encode("utf-8") +
            str(self.faces.dtype).encode("utf-8") +
            self.faces.tobytes(order="C")
        )
        return hashlib.sha256(payload).hexdigest()

    # =====================================================
    # Copy
    # =====================================================
    def copy(self) -> "MeshData":
        return MeshData(
            vertices=self.vertices.copy(),
            faces=self.faces.copy(),
            normals=None if self.normals is None else self.normals.copy(),
        )


def as_mesh(mesh: Any) -> MeshData:
    """
    Coerce supported inputs into a validated MeshData.

    Accepts:
      - MeshData: returned as-is
      - (vertices, faces) tuple/list
      - any object exposing .vertices and .faces (e.g. trimesh.Trimesh)
    """
    if isinstance(mesh, MeshData):
        return mesh

    if isinstance(mesh, (tuple, list)):
        if len(mesh) != 2:
            raise InvalidMeshError("mesh tuple must be (vertices, faces)")
        return MeshData(vertices=mesh[0], faces=mesh[1])

    if hasattr(mesh, "vertices") and hasattr(mesh, "faces"):
        return MeshData(
            vertices=np.asarray(mesh.vertices),
            faces=np.asarray(mesh.faces),
        )

    raise InvalidMeshError(f"Unsupported mesh input type: {type(mesh)}")
