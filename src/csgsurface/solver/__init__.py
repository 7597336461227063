"""Distance solver: variant dispatch and the public query functions.

Components:
    dispatch: Taichi functions and kernels dispatching on SurfaceKind
    distance: Python-scope API returning distances or NO_INTERSECTION
"""

from .distance import (
    NO_INTERSECTION,
    NoIntersection,
    SurfaceHit,
    distance_to_surface,
    evaluate_surface,
    intersect_surface,
    ray_coefficients,
)

__all__ = [
    "NO_INTERSECTION",
    "NoIntersection",
    "SurfaceHit",
    "distance_to_surface",
    "evaluate_surface",
    "intersect_surface",
    "ray_coefficients",
]
