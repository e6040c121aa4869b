from .mesh import MeshData, as_mesh

__all__ = [
    "MeshData",
    "as_mesh",
]
