"""Numerical tolerance and Taichi runtime configuration.

DEFAULT_EPSILON is the one tolerance shared by every decision the solver
makes near degenerate geometry:

- whether a leading coefficient is effectively zero (ray parallel to a plane
  or to a cylinder axis),
- whether a discriminant is effectively zero (tangency),
- whether a root is effectively zero (origin already on the surface, which
  is accepted as a forward distance of 0).

Every public query accepts an ``epsilon`` override.

Ray-surface queries are solved along the normalized ray direction, so the
tolerance is an absolute length scale and does not depend on |direction|.

The discriminant test is absolute as well. For a unit direction a sphere or
cylinder of radius r has b^2 - 4ac = 4 (r^2 - h^2), where h is the distance
from the center to the ray, so any surface with r below about
sqrt(DEFAULT_EPSILON) / 2 (1.6e-5) is reported as tangent and the returned
distance is that to its center line. Pass a smaller epsilon to resolve such
thin surfaces.
"""

import logging
import math

import taichi as ti

logger = logging.getLogger(__name__)

# Shared tolerance for coefficient, discriminant and root tests.
DEFAULT_EPSILON = 1e-9

# Backend used by init_runtime() when no arch is given
DEFAULT_ARCH = ti.cpu


def resolve_epsilon(epsilon: float | None) -> float:
    """Return the tolerance to use for a query.

    Args:
        epsilon: An explicit tolerance, or None for DEFAULT_EPSILON.

    Returns:
        The tolerance as a float.

    Raises:
        ValueError: If epsilon is not a finite positive number.
    """
    if epsilon is None:
        return DEFAULT_EPSILON
    epsilon = float(epsilon)
    if not math.isfinite(epsilon) or epsilon <= 0.0:
        raise ValueError(f"Tolerance epsilon = {epsilon} must be finite and positive.")
    return epsilon


def init_runtime(arch=None, **kwargs) -> None:
    """Initialize Taichi for distance queries.

    All solver types are declared as f64 explicitly, so any Taichi
    initialization works; this helper additionally makes f64 the default
    float type so that literals in user kernels match.

    Args:
        arch: Taichi backend, ti.cpu by default.
        **kwargs: Extra keyword arguments forwarded to ti.init().
    """
    if arch is None:
        arch = DEFAULT_ARCH
    kwargs.setdefault("default_fp", ti.f64)
    logger.debug("Initializing Taichi runtime (arch=%s)", arch)
    ti.init(arch=arch, **kwargs)
