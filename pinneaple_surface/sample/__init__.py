from .barycentric import (
    barycentric_from_uniform,
    interpolate_on_triangles,
)
from .distribution import (
    CumulativeDistribution,
    build_cumulative_distribution,
)
from .rng import (
    UniformSource,
    NumpyUniformSource,
    FunctionUniformSource,
    LockedUniformSource,
    as_uniform_source,
)
from .surface import (
    SurfaceSamples,
    draw_surface_samples,
    sample_surface,
    sample_surface_barycentric,
    sample_surface_points,
    sample_surface_operator,
)
from .parallel import sample_surface_parallel

__all__ = [
    "barycentric_from_uniform",
    "interpolate_on_triangles",
    "CumulativeDistribution",
    "build_cumulative_distribution",
    "UniformSource",
    "NumpyUniformSource",
    "FunctionUniformSource",
    "LockedUniformSource",
    "as_uniform_source",
    "SurfaceSamples",
    "draw_surface_samples",
    "sample_surface",
    "sample_surface_barycentric",
    "sample_surface_points",
    "sample_surface_operator",
    "sample_surface_parallel",
]
