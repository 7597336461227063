"""Ray data structure and vector utilities for surface distance queries.

This module provides the Ray dataclass and the small set of vector helpers
the surface solvers need. Everything is declared in double precision so
that tolerances around 1e-9 remain meaningful, independent of the default
float type Taichi was initialized with.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> origin = vec3(0.0, 0.0, 0.0)
    >>> direction = vec3(0.0, 0.0, -1.0)
    >>> ray = Ray(origin=origin, direction=direction)
    >>> point = ray_at(ray, 5.0)  # Point 5 units along the ray
"""

import taichi as ti
import taichi.math as tm

# Scalar type used by every solver function
real = ti.f64

# Double precision 3D vector type
vec3 = ti.types.vector(3, real)


@ti.dataclass
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction vector of the ray (vec3). It must be
            non-zero but need not be normalized; distances are reported in
            units of t * |direction|.
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: Ray, t: real) -> vec3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + t * ray.direction


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    """Create a ray from origin and direction.

    Args:
        origin: The starting point of the ray.
        direction: The direction vector.

    Returns:
        A new Ray instance.
    """
    return Ray(origin=origin, direction=direction)


@ti.func
def length(v: vec3) -> real:
    """Compute the Euclidean length of a vector."""
    return tm.length(v)


@ti.func
def length_squared(v: vec3) -> real:
    """Compute the squared length of a vector.

    Avoids the square root when only magnitudes are compared.
    """
    return tm.dot(v, v)


@ti.func
def dot(a: vec3, b: vec3) -> real:
    """Compute the dot product of two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The dot product a . b.
    """
    return tm.dot(a, b)


@ti.func
def normalize(v: vec3):
    """Split a non-zero vector into its unit direction and its length.

    The vector is first divided by its largest absolute component, so that
    squaring cannot overflow or underflow for any finite input.

    Args:
        v: The input vector, not all zero.

    Returns:
        Tuple of (unit, norm) with unit * norm == v.
    """
    scale = ti.max(ti.abs(v.x), ti.abs(v.y), ti.abs(v.z))
    scaled = v / scale
    scaled_length = length(scaled)
    return scaled / scaled_length, scale * scaled_length
