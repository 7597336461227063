"""Distance solver: the public ray-to-surface query API.

This module wraps the dispatch kernels with plain Python functions that
accept surface dataclasses and 3-sequences, validate the ray, and turn the
kernel results into explicit outcomes:

- a non-negative float distance (or a SurfaceHit), or
- NO_INTERSECTION, a dedicated falsy singleton.

Distance contract: the solver finds the smallest non-negative ray parameter
t* with O + t* D on the surface and reports t* * |D|. The equation is solved
along D / |D|, so the tolerance is a length and the distance does not
depend on how long D is.

Queries are pure. Kernel launches are serialized through a module lock
because the Taichi runtime is process global.

Example:
    >>> from csgsurface import Sphere, distance_to_surface
    >>> sphere = Sphere(x=0.0, y=0.0, z=0.0, radius=1.0)
    >>> distance_to_surface(sphere, (0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    1.0
"""

import logging
import math
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

import numpy as np
import numpy.typing as npt

from ..config import resolve_epsilon
from ..core.ray import vec3
from ..geometry.surfaces import Surface
from .dispatch import coefficients_kernel, hit_kernel, params_vec, value_kernel

logger = logging.getLogger(__name__)

_kernel_lock = threading.Lock()

Vector3Like = Union[Sequence[float], npt.NDArray[np.floating]]


class NoIntersection:
    """Outcome of a query whose ray never meets the surface ahead of it.

    There is exactly one instance, NO_INTERSECTION. It is falsy, so
    ``if result:`` distinguishes hits from misses (a hit at distance 0.0 is
    falsy too, so prefer ``result is NO_INTERSECTION`` when 0.0 matters).
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_INTERSECTION"


NO_INTERSECTION = NoIntersection()


@dataclass(frozen=True)
class SurfaceHit:
    """Nearest forward intersection of a ray with a surface.

    Attributes:
        t: The ray parameter, t >= 0.
        distance: The travelled distance t * |direction|.
        point: The intersection point origin + t * direction.
    """

    t: float
    distance: float
    point: tuple[float, float, float]


def _as_vector3(value: Vector3Like, name: str) -> npt.NDArray[np.float64]:
    """Convert a 3-sequence to a float64 array, rejecting bad input."""
    try:
        array = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise ValueError(f"{name} must be a sequence of 3 numbers, got {value!r}") from err
    if array.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {array.shape}")
    if not np.all(np.isfinite(array)):
        raise ValueError(f"{name} = {array.tolist()} has non-finite components")
    return array


def _check_surface(surface: Surface) -> None:
    if not isinstance(surface, Surface):
        raise TypeError(f"Expected a Surface, got {type(surface).__name__}")


def _to_vec3(array: npt.NDArray[np.float64]):
    return vec3(float(array[0]), float(array[1]), float(array[2]))


def _to_params(surface: Surface):
    return params_vec(*surface.packed())


def _prepare_ray(origin: Vector3Like, direction: Vector3Like):
    origin_array = _as_vector3(origin, "origin")
    direction_array = _as_vector3(direction, "direction")
    if not np.any(direction_array):
        raise ValueError("direction must be a non-zero vector")
    return _to_vec3(origin_array), _to_vec3(direction_array)


def intersect_surface(
    surface: Surface,
    origin: Vector3Like,
    direction: Vector3Like,
    epsilon: float | None = None,
) -> SurfaceHit | NoIntersection:
    """Find the nearest forward intersection of a ray with a surface.

    Args:
        surface: Any surface variant.
        origin: The ray origin (x, y, z).
        direction: The non-zero ray direction (dx, dy, dz).
        epsilon: Tolerance override; DEFAULT_EPSILON when None.

    Returns:
        A SurfaceHit, or NO_INTERSECTION when the ray is parallel to the
        surface, misses it, or meets it only behind the origin.

    Raises:
        TypeError: If surface is not a Surface.
        ValueError: If origin or direction is malformed or non-finite, the
            direction is zero, or epsilon is not a positive finite number.
    """
    _check_surface(surface)
    eps = resolve_epsilon(epsilon)
    ray_origin, ray_direction = _prepare_ray(origin, direction)

    with _kernel_lock:
        result = hit_kernel(int(surface.kind), _to_params(surface), ray_origin, ray_direction, eps)

    if result[0] == 0.0:
        return NO_INTERSECTION

    # + 0.0 turns a clamped -0.0 into 0.0
    t = float(result[1]) + 0.0
    distance = float(result[2]) + 0.0
    point = (float(result[3]), float(result[4]), float(result[5]))
    if not (math.isfinite(t) and math.isfinite(distance) and all(map(math.isfinite, point))):
        logger.debug("Discarding non-finite root t=%r for %r", t, surface)
        return NO_INTERSECTION
    return SurfaceHit(t=t, distance=distance, point=point)


def distance_to_surface(
    surface: Surface,
    origin: Vector3Like,
    direction: Vector3Like,
    epsilon: float | None = None,
) -> float | NoIntersection:
    """Distance along a ray to the nearest forward intersection with a surface.

    The returned value is t * |direction| for the smallest root t >= 0 of
    the surface equation along the ray; an origin already on the surface
    (within epsilon) yields 0.0.

    Args:
        surface: Any surface variant.
        origin: The ray origin (x, y, z).
        direction: The non-zero ray direction (dx, dy, dz). Its length does
            not change the result.
        epsilon: Tolerance override; DEFAULT_EPSILON when None.

    Returns:
        The distance as a float, or NO_INTERSECTION.

    Raises:
        TypeError: If surface is not a Surface.
        ValueError: If origin or direction is malformed or non-finite, the
            direction is zero, or epsilon is not a positive finite number.
    """
    hit = intersect_surface(surface, origin, direction, epsilon)
    if hit is NO_INTERSECTION:
        return NO_INTERSECTION
    return hit.distance


def evaluate_surface(surface: Surface, point: Vector3Like) -> float:
    """Evaluate the implicit function of a surface at a point.

    Zero on the surface; the sign otherwise depends on how the variant's
    equation is written (spheres and cylinders are negative inside).

    Args:
        surface: Any surface variant.
        point: The point (x, y, z).

    Returns:
        The implicit function value.
    """
    _check_surface(surface)
    point_vec = _to_vec3(_as_vector3(point, "point"))
    with _kernel_lock:
        return float(value_kernel(int(surface.kind), _to_params(surface), point_vec))


def ray_coefficients(
    surface: Surface,
    origin: Vector3Like,
    direction: Vector3Like,
) -> tuple[float, float, float]:
    """Coefficients (a, b, c) of the surface equation along a ray.

    Substituting origin + t * direction into the surface equation gives
    a*t^2 + b*t + c; planes always have a == 0.

    Args:
        surface: Any surface variant.
        origin: The ray origin (x, y, z).
        direction: The non-zero ray direction (dx, dy, dz).

    Returns:
        The tuple (a, b, c).
    """
    _check_surface(surface)
    ray_origin, ray_direction = _prepare_ray(origin, direction)
    with _kernel_lock:
        result = coefficients_kernel(
            int(surface.kind), _to_params(surface), ray_origin, ray_direction
        )
    return float(result[0]), float(result[1]), float(result[2])
