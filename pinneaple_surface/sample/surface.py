"""Area-weighted random sampling of points on triangle mesh surfaces."""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np
import scipy.sparse as sp

from pinneaple_surface.config import DEFAULT_CONFIG, SamplingConfig
from pinneaple_surface.core.mesh import MeshData, as_mesh
from pinneaple_surface.errors import DegenerateDistributionError, InvalidArgumentError, InvalidMeshError
from pinneaple_surface.ops.features import compute_face_areas
from pinneaple_surface.ops.sparse import TripletBuilder
from .barycentric import barycentric_from_uniform, interpolate_on_triangles
from .distribution import CumulativeDistribution, build_cumulative_distribution, validate_weights
from .rng import UniformSource, as_uniform_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurfaceSamples:
    """
    A batch of surface samples in draw order.

    face_ids:    (n,) int64 indices into mesh.faces
    barycentric: (n,3) float64, rows sum to 1

    Both arrays are read-only. The batch can be materialized as points,
    as a sparse sampling operator, or as interpolated vertex attributes.
    """
    face_ids: np.ndarray
    barycentric: np.ndarray

    def __post_init__(self):
        self.face_ids.setflags(write=False)
        self.barycentric.setflags(write=False)

    @classmethod
    def empty(cls) -> "SurfaceSamples":
        return cls(
            face_ids=np.zeros((0,), dtype=np.int64),
            barycentric=np.zeros((0, 3), dtype=np.float64),
        )

    def __len__(self) -> int:
        return int(self.face_ids.shape[0])

    def interpolate(self, mesh: MeshData, values: np.ndarray) -> np.ndarray:
        """Per-vertex values (N,) or (N,k) evaluated at the sampled points."""
        values = np.asarray(values)
        if values.shape[0] != mesh.n_vertices:
            raise InvalidArgumentError(
                f"values must have one row per vertex ({mesh.n_vertices}), got {values.shape[0]}"
            )
        return interpolate_on_triangles(values, mesh.faces, self.face_ids, self.barycentric)

    def to_points(self, mesh: MeshData) -> np.ndarray:
        """Cartesian positions (n,d)."""
        if len(self) == 0:
            return np.zeros((0, mesh.dim), dtype=np.float64)
        return self.interpolate(mesh, mesh.vertices)

    def to_operator(self, mesh: MeshData, fmt: str = "csr") -> sp.spmatrix:
        """
        Sparse (n, N) operator S with S @ mesh.vertices == to_points(mesh).

        Row i has the three barycentric weights at the columns of its face's
        corners; repeated corner indices are summed.
        """
        n = len(self)
        builder = TripletBuilder((n, mesh.n_vertices))
        rows = np.repeat(np.arange(n, dtype=np.int64), 3)
        cols = mesh.faces[self.face_ids].reshape(-1)
        builder.add(rows, cols, self.barycentric.reshape(-1))
        return builder.finalize(fmt)


# =====================================================
# Sampler core
# =====================================================
def check_sample_count(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise InvalidArgumentError(f"n must be an integer, got {type(n).__name__}")
    if not math.isfinite(n) or int(n) != n:
        raise InvalidArgumentError(f"n must be an integer, got {n}")
    n = int(n)
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    return n


def draw_surface_samples(
    distribution: CumulativeDistribution,
    n: int,
    source: UniformSource,
) -> SurfaceSamples:
    """
    Draw n independent (face, barycentric) pairs.

    Per draw, three uniforms (r1, r2, r3) are taken from the source in that
    order: r1 * total picks the face by binary search over the cumulative
    weights, (r2, r3) go through the sqrt transform. Faces are drawn with
    replacement. n == 0 does not touch the source.
    """
    n = check_sample_count(n)
    if n == 0:
        return SurfaceSamples.empty()
    if distribution.total <= 0:
        raise DegenerateDistributionError(
            f"cannot draw {n} samples: total face weight is zero ({distribution.n_bins} faces)"
        )

    r = source.uniform_block(n, 3)
    face_ids = distribution.locate(r[:, 0] * distribution.total)
    bary = barycentric_from_uniform(r[:, 1], r[:, 2])
    return SurfaceSamples(face_ids=face_ids, barycentric=bary)


def resolve_distribution(
    mesh: MeshData,
    n: int,
    *,
    face_weights: Optional[np.ndarray] = None,
    config: Optional[SamplingConfig] = None,
) -> CumulativeDistribution:
    """
    Face weights (areas unless given) -> cumulative distribution, applying
    the configured zero-weight policy when n > 0.
    """
    config = config or DEFAULT_CONFIG

    if face_weights is None:
        weights = compute_face_areas(mesh)
        if not np.all(np.isfinite(weights)):
            raise InvalidMeshError("face areas overflow float64; rescale the mesh coordinates")
    else:
        weights = validate_weights(face_weights)
        if weights.shape[0] != mesh.n_faces:
            raise InvalidArgumentError(
                f"face_weights must have one entry per face ({mesh.n_faces}), got {weights.shape[0]}"
            )

    distribution = build_cumulative_distribution(weights)
    if not math.isfinite(distribution.total):
        if face_weights is None:
            raise InvalidMeshError("total surface area overflows float64; rescale the mesh coordinates")
        raise InvalidArgumentError("sum of face_weights overflows float64")
    logger.debug("face distribution: %d faces, total weight %.6g", distribution.n_bins, distribution.total)

    if n > 0 and distribution.total <= 0:
        if mesh.n_faces == 0:
            raise DegenerateDistributionError(f"cannot draw {n} samples from a mesh without faces")
        if config.zero_weight_policy == "uniform":
            logger.warning(
                "All %d faces have zero weight; falling back to uniform face selection.",
                mesh.n_faces,
            )
            distribution = build_cumulative_distribution(np.ones((mesh.n_faces,), dtype=np.float64))
        else:
            raise DegenerateDistributionError(
                f"cannot draw {n} samples: all {mesh.n_faces} faces have zero weight"
            )
    return distribution


def sample_surface(
    mesh: Any,
    n: int,
    *,
    rng: Any = None,
    face_weights: Optional[np.ndarray] = None,
    config: Optional[SamplingConfig] = None,
) -> SurfaceSamples:
    """
    Sample n points uniformly over the surface (triangle areas as weights),
    or proportionally to face_weights when given.

    rng: None (seeded from config.default_seed), int seed, numpy Generator,
         UniformSource, or a zero-argument callable returning U(0,1) floats.
    """
    config = config or DEFAULT_CONFIG
    mesh = as_mesh(mesh)
    n = check_sample_count(n)

    distribution = resolve_distribution(mesh, n, face_weights=face_weights, config=config)
    if n == 0:
        return SurfaceSamples.empty()

    source = as_uniform_source(rng, config)
    samples = draw_surface_samples(distribution, n, source)
    logger.debug("drew %d surface samples over %d faces", n, mesh.n_faces)
    return samples


# =====================================================
# Output representations
# =====================================================
def sample_surface_barycentric(
    mesh: Any,
    n: int,
    *,
    rng: Any = None,
    face_weights: Optional[np.ndarray] = None,
    config: Optional[SamplingConfig] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Returns:
      B:  (n,3) barycentric coordinates, row i relative to face FI[i]
      FI: (n,) face indices
    """
    s = sample_surface(mesh, n, rng=rng, face_weights=face_weights, config=config)
    return s.barycentric, s.face_ids


def sample_surface_points(
    mesh: Any,
    n: int,
    *,
    rng: Any = None,
    face_weights: Optional[np.ndarray] = None,
    config: Optional[SamplingConfig] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Returns:
      B:  (n,3) barycentric coordinates
      FI: (n,) face indices
      X:  (n,d) sample positions, X[i] = sum_k B[i,k] * V[F[FI[i],k]]
    """
    mesh = as_mesh(mesh)
    s = sample_surface(mesh, n, rng=rng, face_weights=face_weights, config=config)
    return s.barycentric, s.face_ids, s.to_points(mesh)


def sample_surface_operator(
    mesh: Any,
    n: int,
    *,
    rng: Any = None,
    face_weights: Optional[np.ndarray] = None,
    config: Optional[SamplingConfig] = None,
) -> Tuple[sp.spmatrix, np.ndarray]:
    """
    Returns:
      S:  (n, #V) sparse matrix so that S @ V produces the sample points,
          and S @ A samples any other per-vertex attribute A at the same
          surface locations without redrawing
      FI: (n,) face indices
    """
    config = config or DEFAULT_CONFIG
    mesh = as_mesh(mesh)
    s = sample_surface(mesh, n, rng=rng, face_weights=face_weights, config=config)
    return s.to_operator(mesh, fmt=config.operator_format), s.face_ids
