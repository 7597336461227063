"""Core building blocks for surface distance queries.

Components:
    ray: Ray data structure and double precision vector utilities
    roots: Nearest forward root of linear and quadratic polynomials in t

All functions are Taichi functions (@ti.func) for use inside kernels.
"""

from .ray import Ray, dot, length, length_squared, make_ray, normalize, ray_at, real, vec3
from .roots import (
    RootRecord,
    is_finite,
    miss_record,
    nearest_linear_root,
    nearest_polynomial_root,
    nearest_quadratic_root,
    solve_quadratic_robust,
)

__all__ = [
    "Ray",
    "ray_at",
    "make_ray",
    "real",
    "vec3",
    "length",
    "length_squared",
    "dot",
    "normalize",
    "RootRecord",
    "miss_record",
    "is_finite",
    "nearest_linear_root",
    "nearest_quadratic_root",
    "nearest_polynomial_root",
    "solve_quadratic_robust",
]
