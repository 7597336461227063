"""Sphere primitive with robust ray-sphere distance.

The ray-sphere intersection is found by solving:
    |ray_origin + t * ray_direction - center|^2 = radius^2

Expanding and rearranging gives the quadratic equation:
    a*t^2 + b*t + c = 0

where:
    a = dot(direction, direction)
    b = 2 * dot(direction, oc)
    c = dot(oc, oc) - radius^2
    oc = origin - center

Root selection (tangency, origin inside or on the sphere, sphere behind
the ray) is delegated to nearest_quadratic_root.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from csgsurface.core.ray import vec3
    >>> from csgsurface.geometry.sphere import SphereParams, hit_sphere
    >>> sphere = SphereParams(center=vec3(0, 0, -1), radius=0.5)
    >>> # Use hit_sphere within a Taichi kernel
"""

import taichi as ti

from ..core.ray import dot, length_squared, real, vec3
from ..core.roots import RootRecord, miss_record, nearest_quadratic_root


@ti.dataclass
class SphereParams:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere (positive float).
    """

    center: vec3
    radius: real


@ti.func
def sphere_value(point: vec3, sphere: SphereParams) -> real:
    """Evaluate |point - center|^2 - radius^2."""
    return length_squared(point - sphere.center) - sphere.radius * sphere.radius


@ti.func
def sphere_ray_coefficients(ray_origin: vec3, ray_direction: vec3, sphere: SphereParams):
    """Coefficients (a, b, c) of the sphere equation along the ray."""
    oc = ray_origin - sphere.center
    a = length_squared(ray_direction)
    b = 2.0 * dot(ray_direction, oc)
    c = length_squared(oc) - sphere.radius * sphere.radius
    return a, b, c


@ti.func
def hit_sphere(
    ray_origin: vec3,
    ray_direction: vec3,
    sphere: SphereParams,
    eps: real,
) -> RootRecord:
    """Find the nearest forward ray parameter on a sphere.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction vector of the ray (need not be normalized).
        sphere: The sphere to test against.
        eps: Shared tolerance.

    Returns:
        A RootRecord. Check the hit field to determine if the ray meets the
        sphere at or ahead of its origin.
    """
    a, b, c = sphere_ray_coefficients(ray_origin, ray_direction, sphere)
    rec = miss_record()
    if a >= eps:
        rec = nearest_quadratic_root(a, b, c, eps)
    return rec
