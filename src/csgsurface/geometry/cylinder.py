"""Axis-aligned cylinder primitives.

A cylinder parallel to a coordinate axis reduces to a circle in the plane
of the two other coordinates. Projecting out the axis component, with
oc = origin - center:

    a = |direction_perp|^2
    b = 2 * dot(direction_perp, oc_perp)
    c = |oc_perp|^2 - radius^2

where v_perp keeps the two non-axis components of v. Projection multiplies
by a 0/1 mask, so a is an exact sum of the two squared components.

A ray with a < eps runs parallel to the axis and never crosses the
cylinder, whether it starts inside, on, or outside of it.
"""

import taichi as ti

from ..core.ray import dot, real, vec3
from ..core.roots import RootRecord, miss_record, nearest_quadratic_root


@ti.dataclass
class CylinderParams:
    """An infinite cylinder parallel to a coordinate axis.

    Attributes:
        center: A point on the cylinder axis (vec3). Its axis component is
            ignored.
        axis: Unit vector of the coordinate axis the cylinder runs along.
        radius: The radius of the cylinder (positive float).
    """

    center: vec3
    axis: vec3
    radius: real


@ti.func
def _perpendicular(v: vec3, cylinder: CylinderParams) -> vec3:
    """Zero the axis component of v."""
    return v * (1.0 - cylinder.axis)


@ti.func
def cylinder_value(point: vec3, cylinder: CylinderParams) -> real:
    """Evaluate the squared distance to the axis minus radius^2."""
    oc = _perpendicular(point - cylinder.center, cylinder)
    return dot(oc, oc) - cylinder.radius * cylinder.radius


@ti.func
def cylinder_ray_coefficients(ray_origin: vec3, ray_direction: vec3, cylinder: CylinderParams):
    """Coefficients (a, b, c) of the cylinder equation along the ray."""
    oc = _perpendicular(ray_origin - cylinder.center, cylinder)
    dp = _perpendicular(ray_direction, cylinder)
    a = dot(dp, dp)
    b = 2.0 * dot(dp, oc)
    c = dot(oc, oc) - cylinder.radius * cylinder.radius
    return a, b, c


@ti.func
def hit_cylinder(
    ray_origin: vec3,
    ray_direction: vec3,
    cylinder: CylinderParams,
    eps: real,
) -> RootRecord:
    """Find the nearest forward ray parameter on an axis-aligned cylinder.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction vector of the ray.
        cylinder: The cylinder to test against.
        eps: Shared tolerance.

    Returns:
        A RootRecord; a miss when the ray runs parallel to the axis.
    """
    a, b, c = cylinder_ray_coefficients(ray_origin, ray_direction, cylinder)
    rec = miss_record()
    if a >= eps:
        rec = nearest_quadratic_root(a, b, c, eps)
    return rec
