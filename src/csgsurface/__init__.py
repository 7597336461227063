"""Ray-to-surface distance queries for quadric-derived CSG surfaces.

This package answers one question for particle transport and ray tracing
codes: how far along a ray until it meets a given surface. The arithmetic
runs in double precision Taichi functions, wrapped by a small Python-scope
API.

Subpackages:
    core: Ray data structure, vector utilities and polynomial root selection
    geometry: The nine surface variants and their per-family Taichi functions
    solver: Variant dispatch and the public distance query

Example:
    >>> from csgsurface import Sphere, distance_to_surface
    >>> distance_to_surface(Sphere(0.0, 0.0, 0.0, 1.0), (-5.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    4.0
"""

from .config import DEFAULT_EPSILON, init_runtime
from .geometry.surfaces import (
    InvalidParameters,
    Plane,
    Quadric,
    Sphere,
    Surface,
    SurfaceKind,
    XAxisCylinder,
    XPlane,
    YAxisCylinder,
    YPlane,
    ZAxisCylinder,
    ZPlane,
    make_surface,
)
from .solver.distance import (
    NO_INTERSECTION,
    NoIntersection,
    SurfaceHit,
    distance_to_surface,
    evaluate_surface,
    intersect_surface,
    ray_coefficients,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_EPSILON",
    "init_runtime",
    "InvalidParameters",
    "Surface",
    "SurfaceKind",
    "Sphere",
    "XPlane",
    "YPlane",
    "ZPlane",
    "Plane",
    "XAxisCylinder",
    "YAxisCylinder",
    "ZAxisCylinder",
    "Quadric",
    "make_surface",
    "NO_INTERSECTION",
    "NoIntersection",
    "SurfaceHit",
    "distance_to_surface",
    "intersect_surface",
    "evaluate_surface",
    "ray_coefficients",
]
