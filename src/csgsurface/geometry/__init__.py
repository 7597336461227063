"""Geometry module for the surface model and per-family intersection math.

Components:
    surfaces: The nine immutable surface variants and their validation
    sphere: Sphere coefficients and ray-sphere root selection
    plane: Axis-aligned and general planes
    cylinder: Cylinders parallel to a coordinate axis
    quadric: General second-degree surfaces

All per-family routines are Taichi functions (@ti.func) following the
same pattern:
    value = <family>_value(point, params)
    a, b, c = <family>_ray_coefficients(ray_origin, ray_direction, params)
    record = hit_<family>(ray_origin, ray_direction, params, eps)
"""

from .cylinder import CylinderParams, cylinder_ray_coefficients, cylinder_value, hit_cylinder
from .plane import PlaneParams, axis_plane, hit_plane, plane_ray_coefficients, plane_value
from .quadric import QuadricParams, hit_quadric, quadric_ray_coefficients, quadric_value
from .sphere import SphereParams, hit_sphere, sphere_ray_coefficients, sphere_value
from .surfaces import (
    PACKED_SIZE,
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

__all__ = [
    "PACKED_SIZE",
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
    "SphereParams",
    "sphere_value",
    "sphere_ray_coefficients",
    "hit_sphere",
    "PlaneParams",
    "axis_plane",
    "plane_value",
    "plane_ray_coefficients",
    "hit_plane",
    "CylinderParams",
    "cylinder_value",
    "cylinder_ray_coefficients",
    "hit_cylinder",
    "QuadricParams",
    "quadric_value",
    "quadric_ray_coefficients",
    "hit_quadric",
]
