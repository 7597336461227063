"""General quadric surface.

    A x^2 + B y^2 + C z^2 + D xy + E yz + F xz + G x + H y + J z + K = 0

Substituting P = O + t * V and collecting powers of t:

    a = A Vx^2 + B Vy^2 + C Vz^2 + D Vx Vy + E Vy Vz + F Vx Vz
    b = 2 (A Ox Vx + B Oy Vy + C Oz Vz)
        + D (Ox Vy + Oy Vx) + E (Oy Vz + Oz Vy) + F (Ox Vz + Oz Vx)
        + G Vx + H Vy + J Vz
    c = quadric evaluated at O

The quadratic term can vanish along particular rays (paraboloid axes,
cone generators) or everywhere (planes written as quadrics), in which case
the linear equation b*t + c = 0 is solved instead. Note that a may be
negative for hyperboloids and cones.
"""

import taichi as ti

from ..core.ray import dot, real, vec3
from ..core.roots import RootRecord, nearest_polynomial_root


@ti.dataclass
class QuadricParams:
    """Coefficients of a general quadric, grouped by term.

    Attributes:
        square: (A, B, C), coefficients of x^2, y^2, z^2.
        cross: (D, E, F), coefficients of xy, yz, xz.
        linear: (G, H, J), coefficients of x, y, z.
        constant: K.
    """

    square: vec3
    cross: vec3
    linear: vec3
    constant: real


@ti.func
def _cross_terms(u: vec3, v: vec3) -> vec3:
    """Products (u.x v.y, u.y v.z, u.x v.z) matching the D, E, F terms."""
    return vec3(u.x * v.y, u.y * v.z, u.x * v.z)


@ti.func
def quadric_value(point: vec3, quadric: QuadricParams) -> real:
    """Evaluate the quadric polynomial at point."""
    return (
        dot(quadric.square, point * point)
        + dot(quadric.cross, _cross_terms(point, point))
        + dot(quadric.linear, point)
        + quadric.constant
    )


@ti.func
def quadric_ray_coefficients(ray_origin: vec3, ray_direction: vec3, quadric: QuadricParams):
    """Coefficients (a, b, c) of the quadric polynomial along the ray."""
    o = ray_origin
    v = ray_direction
    a = dot(quadric.square, v * v) + dot(quadric.cross, _cross_terms(v, v))
    b = (
        2.0 * dot(quadric.square, o * v)
        + dot(quadric.cross, _cross_terms(o, v) + _cross_terms(v, o))
        + dot(quadric.linear, v)
    )
    c = quadric_value(o, quadric)
    return a, b, c


@ti.func
def hit_quadric(
    ray_origin: vec3,
    ray_direction: vec3,
    quadric: QuadricParams,
    eps: real,
) -> RootRecord:
    """Find the nearest forward ray parameter on a general quadric.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction vector of the ray.
        quadric: The quadric to test against.
        eps: Shared tolerance.

    Returns:
        A RootRecord; a miss when no root lies at or ahead of the origin.
    """
    a, b, c = quadric_ray_coefficients(ray_origin, ray_direction, quadric)
    return nearest_polynomial_root(a, b, c, eps)
