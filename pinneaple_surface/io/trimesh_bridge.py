"""In-memory conversion between trimesh.Trimesh and MeshData."""
from __future__ import annotations

import numpy as np

from pinneaple_surface.core.mesh import MeshData
from pinneaple_surface.errors import InvalidMeshError


class TrimeshBridge:
    """
    Adapter between trimesh.Trimesh and pinneaple_surface MeshData.

    Conversion only: no file loading and no repair. The trimesh object is
    built with process=False so vertex order and face indices are kept
    exactly, which sampling operators rely on.
    """

    def from_trimesh(self, tm, *, compute_normals: bool = False) -> MeshData:
        """
        Convert trimesh.Trimesh -> MeshData.
        """
        import trimesh

        if not isinstance(tm, trimesh.Trimesh):
            raise TypeError("from_trimesh expects a trimesh.Trimesh")

        v = tm.vertices.view(np.ndarray)
        f = tm.faces.view(np.ndarray)

        n = None
        if compute_normals and len(f):
            n = tm.face_normals.view(np.ndarray)

        return MeshData(vertices=v, faces=f, normals=n)

    def to_trimesh(self, mesh: MeshData):
        """
        Convert MeshData -> trimesh.Trimesh (3-D meshes only).
        """
        import trimesh

        if mesh.dim != 3:
            raise InvalidMeshError(f"trimesh requires 3-D vertices, got d={mesh.dim}")
        return trimesh.Trimesh(vertices=mesh.vertices, faces=mesh.faces, process=False)
