# pinneaple_surface/__init__.py

"""
pinneaple_surface

Area-weighted random sampling of points on triangle mesh surfaces.

Outputs share one sampling core:
- barycentric coordinates + face ids
- Cartesian sample positions
- a sparse (n, #V) operator that samples any per-vertex attribute
  (positions, normals, colors, uv ...) at the same surface points

Design principles:
- numpy/scipy only in the core; trimesh and torch are optional bridges
- reproducible by default (fixed default seed, no global random state)
"""

from .config import SamplingConfig
from .core.mesh import MeshData
from .errors import (
    PinneapleSurfaceError,
    InvalidMeshError,
    InvalidArgumentError,
    DegenerateDistributionError,
)
from .ops.features import compute_face_areas
from .ops.sparse import invert_diag
from .sample.surface import (
    SurfaceSamples,
    sample_surface,
    sample_surface_barycentric,
    sample_surface_points,
    sample_surface_operator,
)
from .sample.parallel import sample_surface_parallel

__all__ = [
    "SamplingConfig",
    "MeshData",
    "PinneapleSurfaceError",
    "InvalidMeshError",
    "InvalidArgumentError",
    "DegenerateDistributionError",
    "compute_face_areas",
    "invert_diag",
    "SurfaceSamples",
    "sample_surface",
    "sample_surface_barycentric",
    "sample_surface_points",
    "sample_surface_operator",
    "sample_surface_parallel",
]
