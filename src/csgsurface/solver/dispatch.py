"""Surface-variant dispatch and the query kernels.

Surfaces reach the kernels as a (kind, params) pair: the SurfaceKind tag
and the coefficients packed into PACKED_SIZE doubles by Surface.packed().
The Taichi functions here unpack the coefficients into the per-family
parameter structs and call the matching geometry routine.

Each query launches one kernel and reads its result back as a small
double precision vector; no fields or other global state are involved.
"""

import taichi as ti

from ..core.ray import make_ray, normalize, ray_at, real, vec3
from ..core.roots import RootRecord, miss_record
from ..geometry.cylinder import (
    CylinderParams,
    cylinder_ray_coefficients,
    cylinder_value,
    hit_cylinder,
)
from ..geometry.plane import (
    PlaneParams,
    axis_plane,
    hit_plane,
    plane_ray_coefficients,
    plane_value,
)
from ..geometry.quadric import (
    QuadricParams,
    hit_quadric,
    quadric_ray_coefficients,
    quadric_value,
)
from ..geometry.sphere import (
    SphereParams,
    hit_sphere,
    sphere_ray_coefficients,
    sphere_value,
)
from ..geometry.surfaces import PACKED_SIZE, SurfaceKind

# Packed surface coefficients
params_vec = ti.types.vector(PACKED_SIZE, real)

# (a, b, c) of the polynomial along a ray
coefficients_vec = ti.types.vector(3, real)

# (hit, t, distance, point.x, point.y, point.z)
hit_vec = ti.types.vector(6, real)


# =============================================================================
# Coefficient Unpacking
# =============================================================================


@ti.func
def unpack_sphere(p: params_vec) -> SphereParams:
    """Sphere from packed (x, y, z, radius)."""
    return SphereParams(center=vec3(p[0], p[1], p[2]), radius=p[3])


@ti.func
def unpack_plane(kind: ti.i32, p: params_vec) -> PlaneParams:
    """Plane from packed (x), (y), (z) or (a, b, c, d), depending on kind."""
    plane = PlaneParams(normal=vec3(p[0], p[1], p[2]), d=p[3])
    if kind == int(SurfaceKind.X_PLANE):
        plane = axis_plane(vec3(1.0, 0.0, 0.0), p[0])
    elif kind == int(SurfaceKind.Y_PLANE):
        plane = axis_plane(vec3(0.0, 1.0, 0.0), p[0])
    elif kind == int(SurfaceKind.Z_PLANE):
        plane = axis_plane(vec3(0.0, 0.0, 1.0), p[0])
    return plane


@ti.func
def unpack_cylinder(kind: ti.i32, p: params_vec) -> CylinderParams:
    """Cylinder from packed (center_u, center_v, radius), depending on kind."""
    cylinder = CylinderParams(center=vec3(p[0], p[1], 0.0), axis=vec3(0.0, 0.0, 1.0), radius=p[2])
    if kind == int(SurfaceKind.X_AXIS_CYLINDER):
        cylinder = CylinderParams(center=vec3(0.0, p[0], p[1]), axis=vec3(1.0, 0.0, 0.0), radius=p[2])
    elif kind == int(SurfaceKind.Y_AXIS_CYLINDER):
        cylinder = CylinderParams(center=vec3(p[0], 0.0, p[1]), axis=vec3(0.0, 1.0, 0.0), radius=p[2])
    return cylinder


@ti.func
def unpack_quadric(p: params_vec) -> QuadricParams:
    """Quadric from packed (A, B, C, D, E, F, G, H, J, K)."""
    return QuadricParams(
        square=vec3(p[0], p[1], p[2]),
        cross=vec3(p[3], p[4], p[5]),
        linear=vec3(p[6], p[7], p[8]),
        constant=p[9],
    )


@ti.func
def _is_plane(kind: ti.i32) -> ti.i32:
    return kind >= int(SurfaceKind.X_PLANE) and kind <= int(SurfaceKind.PLANE)


@ti.func
def _is_cylinder(kind: ti.i32) -> ti.i32:
    return kind >= int(SurfaceKind.X_AXIS_CYLINDER) and kind <= int(SurfaceKind.Z_AXIS_CYLINDER)


# =============================================================================
# Variant Dispatch
# =============================================================================


@ti.func
def surface_value(kind: ti.i32, p: params_vec, point: vec3) -> real:
    """Evaluate the implicit function of any surface variant at point."""
    value = ti.cast(0.0, real)
    if kind == int(SurfaceKind.SPHERE):
        value = sphere_value(point, unpack_sphere(p))
    elif _is_plane(kind):
        value = plane_value(point, unpack_plane(kind, p))
    elif _is_cylinder(kind):
        value = cylinder_value(point, unpack_cylinder(kind, p))
    elif kind == int(SurfaceKind.QUADRIC):
        value = quadric_value(point, unpack_quadric(p))
    return value


@ti.func
def surface_ray_coefficients(
    kind: ti.i32, p: params_vec, ray_origin: vec3, ray_direction: vec3
) -> coefficients_vec:
    """Polynomial coefficients (a, b, c) of any surface variant along a ray."""
    result = coefficients_vec(0.0, 0.0, 0.0)
    if kind == int(SurfaceKind.SPHERE):
        a, b, c = sphere_ray_coefficients(ray_origin, ray_direction, unpack_sphere(p))
        result = coefficients_vec(a, b, c)
    elif _is_plane(kind):
        a, b, c = plane_ray_coefficients(ray_origin, ray_direction, unpack_plane(kind, p))
        result = coefficients_vec(a, b, c)
    elif _is_cylinder(kind):
        a, b, c = cylinder_ray_coefficients(ray_origin, ray_direction, unpack_cylinder(kind, p))
        result = coefficients_vec(a, b, c)
    elif kind == int(SurfaceKind.QUADRIC):
        a, b, c = quadric_ray_coefficients(ray_origin, ray_direction, unpack_quadric(p))
        result = coefficients_vec(a, b, c)
    return result


@ti.func
def hit_surface(
    kind: ti.i32, p: params_vec, ray_origin: vec3, ray_direction: vec3, eps: real
) -> RootRecord:
    """Nearest forward ray parameter on any surface variant.

    Args:
        kind: The SurfaceKind value.
        p: Packed surface coefficients.
        ray_origin: The starting point of the ray.
        ray_direction: The direction vector of the ray.
        eps: Shared tolerance.

    Returns:
        A RootRecord from the matching per-family routine.
    """
    rec = miss_record()
    if kind == int(SurfaceKind.SPHERE):
        rec = hit_sphere(ray_origin, ray_direction, unpack_sphere(p), eps)
    elif _is_plane(kind):
        rec = hit_plane(ray_origin, ray_direction, unpack_plane(kind, p), eps)
    elif _is_cylinder(kind):
        rec = hit_cylinder(ray_origin, ray_direction, unpack_cylinder(kind, p), eps)
    elif kind == int(SurfaceKind.QUADRIC):
        rec = hit_quadric(ray_origin, ray_direction, unpack_quadric(p), eps)
    return rec


# =============================================================================
# Kernels
# =============================================================================


@ti.kernel
def hit_kernel(
    kind: ti.i32, p: params_vec, ray_origin: vec3, ray_direction: vec3, eps: real
) -> hit_vec:
    """Launch hit_surface and pack (hit, t, distance, point) for Python scope.

    The surface is solved along the unit direction, so eps compares against
    lengths and the answer does not depend on how long ray_direction is.
    The parameter of the original ray is the unit distance divided by |D|.
    """
    unit, norm = normalize(ray_direction)
    ray = make_ray(ray_origin, unit)
    rec = hit_surface(kind, p, ray.origin, ray.direction, eps)
    point = ray_at(ray, rec.t)
    return hit_vec(ti.cast(rec.hit, real), rec.t / norm, rec.t, point.x, point.y, point.z)


@ti.kernel
def value_kernel(kind: ti.i32, p: params_vec, point: vec3) -> real:
    """Launch surface_value."""
    return surface_value(kind, p, point)


@ti.kernel
def coefficients_kernel(
    kind: ti.i32, p: params_vec, ray_origin: vec3, ray_direction: vec3
) -> coefficients_vec:
    """Launch surface_ray_coefficients."""
    return surface_ray_coefficients(kind, p, ray_origin, ray_direction)
