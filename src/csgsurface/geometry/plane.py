"""Plane primitives: axis-aligned planes and the general plane.

Every plane is handled in the general form dot(normal, P) + d = 0, where
normal = (a, b, c) need not be unit length. The axis-aligned plane X = x
is the special case normal = (1, 0, 0), d = -x.

Substituting the ray gives the linear equation:
    alpha + beta * t = 0

with alpha = dot(normal, origin) + d and beta = dot(normal, direction).
A ray with |beta| < eps runs parallel to the plane and never meets it,
including when it lies within the plane.
"""

import taichi as ti

from ..core.ray import dot, real, vec3
from ..core.roots import RootRecord, nearest_linear_root


@ti.dataclass
class PlaneParams:
    """A plane dot(normal, P) + d = 0.

    Attributes:
        normal: The coefficients (a, b, c) of the plane equation (vec3).
        d: The constant term.
    """

    normal: vec3
    d: real


@ti.func
def axis_plane(axis: vec3, offset: real) -> PlaneParams:
    """Create the plane perpendicular to a coordinate axis at offset.

    Args:
        axis: Unit vector of the coordinate axis, e.g. (1, 0, 0) for X = x.
        offset: The plane position along that axis.

    Returns:
        The equivalent general plane.
    """
    return PlaneParams(normal=axis, d=-offset)


@ti.func
def plane_value(point: vec3, plane: PlaneParams) -> real:
    """Evaluate dot(normal, point) + d."""
    return dot(plane.normal, point) + plane.d


@ti.func
def plane_ray_coefficients(ray_origin: vec3, ray_direction: vec3, plane: PlaneParams):
    """Coefficients (0, beta, alpha) of the plane equation along the ray."""
    beta = dot(plane.normal, ray_direction)
    alpha = plane_value(ray_origin, plane)
    return 0.0, beta, alpha


@ti.func
def hit_plane(
    ray_origin: vec3,
    ray_direction: vec3,
    plane: PlaneParams,
    eps: real,
) -> RootRecord:
    """Find the nearest forward ray parameter on a plane.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction vector of the ray.
        plane: The plane to test against.
        eps: Shared tolerance.

    Returns:
        A RootRecord; a miss when the ray is parallel to the plane or the
        plane lies behind the origin.
    """
    beta = dot(plane.normal, ray_direction)
    alpha = plane_value(ray_origin, plane)
    return nearest_linear_root(beta, alpha, eps)
