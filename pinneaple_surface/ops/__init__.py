from .features import (
    compute_face_areas,
    compute_face_normals,
    compute_vertex_normals,
    surface_area,
)
from .sparse import TripletBuilder, invert_diag

__all__ = [
    "compute_face_areas",
    "compute_face_normals",
    "compute_vertex_normals",
    "surface_area",
    "TripletBuilder",
    "invert_diag",
]
