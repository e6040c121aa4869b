"""Error types raised by pinneaple_surface."""
from __future__ import annotations


class PinneapleSurfaceError(Exception):
    """Base class for all pinneaple_surface errors."""


class InvalidMeshError(PinneapleSurfaceError, ValueError):
    """
    Mesh arrays are malformed.

    Raised for out-of-range face indices, faces that are not triangles,
    or vertex/face containers with inconsistent dimensionality.
    """


class InvalidArgumentError(PinneapleSurfaceError, ValueError):
    """A scalar or array argument is out of its valid domain (e.g. n < 0)."""


class DegenerateDistributionError(PinneapleSurfaceError, ValueError):
    """Samples were requested but the total face weight is zero."""
