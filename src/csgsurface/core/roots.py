"""Nearest forward root of a linear or quadratic polynomial in t.

Every surface query reduces to a polynomial a*t^2 + b*t + c along the ray.
The functions here pick the smallest root that is not behind the ray
origin, under a single tolerance eps:

- |leading coefficient| < eps: the coefficient is treated as zero,
- |discriminant| <= eps: tangency, one double root,
- root >= -eps: accepted, and clamped to 0 when it lies in [-eps, 0].

An overflowing discriminant or root is a miss, never a hit at t = 0.

Two distinct roots are computed with the robust quadratic formula: the
root whose computation adds like-signed terms comes first, the other one
follows from the product of roots c / a, so that nearly equal b^2 and 4ac
never cancel catastrophically.
"""

import taichi as ti

from .ray import real


@ti.dataclass
class RootRecord:
    """Outcome of a root selection.

    Attributes:
        hit: 1 if a forward root exists, 0 otherwise.
        t: The selected ray parameter. Only valid if hit == 1.
    """

    hit: ti.i32
    t: real


@ti.func
def miss_record() -> RootRecord:
    """Create a RootRecord indicating no forward root."""
    return RootRecord(hit=0, t=0.0)


@ti.func
def is_finite(x: real) -> ti.i32:
    """Return 1 if x is neither infinite nor NaN.

    Reads the exponent bits, which stay valid under fast math and whatever
    default float type the runtime was initialized with.
    """
    exponent = (ti.bit_cast(x, ti.u64) >> ti.u64(52)) & ti.u64(0x7FF)
    return exponent != ti.u64(0x7FF)


@ti.func
def _accept(t: real, eps: real) -> RootRecord:
    """Accept t if it is not behind the origin, clamping tiny negatives to 0."""
    rec = miss_record()
    if t >= -eps:
        rec = RootRecord(hit=1, t=ti.max(t, 0.0))
    return rec


@ti.func
def nearest_linear_root(b: real, c: real, eps: real) -> RootRecord:
    """Solve b*t + c = 0 for the forward root.

    A ray parallel to the surface (|b| < eps) has no root, whether or not
    it lies within the surface.

    Args:
        b: Linear coefficient.
        c: Constant term.
        eps: Shared tolerance.

    Returns:
        A RootRecord with the root, or a miss.
    """
    rec = miss_record()
    if ti.abs(b) >= eps:
        rec = _accept(-c / b, eps)
    return rec


@ti.func
def solve_quadratic_robust(a: real, b: real, c: real, sqrt_d: real):
    """Return both roots of a*t^2 + b*t + c = 0, ordered t0 <= t1.

    Args:
        a: Quadratic coefficient, non-zero.
        b: Linear coefficient.
        c: Constant term.
        sqrt_d: Square root of the positive discriminant b^2 - 4ac.

    Returns:
        Tuple of (t0, t1) where t0 <= t1.
    """
    # q = -(b + sign(b) * sqrt(d)) / 2 never cancels
    sign_b = ti.select(b < 0.0, -1.0, 1.0)
    q = -0.5 * (b + sign_b * sqrt_d)

    t0 = q / a
    t1 = c / q

    # Ensure t0 <= t1
    if t0 > t1:
        temp = t0
        t0 = t1
        t1 = temp

    return t0, t1


@ti.func
def nearest_quadratic_root(a: real, b: real, c: real, eps: real) -> RootRecord:
    """Select the nearest forward root of a*t^2 + b*t + c = 0.

    The caller guarantees |a| >= eps.

    Args:
        a: Quadratic coefficient.
        b: Linear coefficient.
        c: Constant term.
        eps: Shared tolerance.

    Returns:
        A RootRecord holding the smallest root >= -eps, or a miss when the
        discriminant is negative, either it or a root is not finite, or both
        roots lie behind the origin.
    """
    discriminant = b * b - 4.0 * a * c
    rec = miss_record()

    if not is_finite(discriminant):
        # b^2 or 4ac overflowed; c / q would collapse to a false root at 0
        rec = miss_record()
    elif ti.abs(discriminant) <= eps:
        # Tangent: one double root
        rec = _accept(-b / (2.0 * a), eps)
    elif discriminant > eps:
        t0, t1 = solve_quadratic_robust(a, b, c, ti.sqrt(discriminant))
        # A non-finite q makes both q / a and c / q meaningless
        if is_finite(t0) and is_finite(t1):
            rec = _accept(t0, eps)
            if rec.hit == 0:
                rec = _accept(t1, eps)

    return rec


@ti.func
def nearest_polynomial_root(a: real, b: real, c: real, eps: real) -> RootRecord:
    """Select the nearest forward root, falling back to the linear case.

    Used for general quadrics whose quadratic term can vanish along a ray
    (paraboloids along their axis, cones along a generator, planes written
    as quadrics).
    """
    rec = miss_record()
    if ti.abs(a) < eps:
        rec = nearest_linear_root(b, c, eps)
    else:
        rec = nearest_quadratic_root(a, b, c, eps)
    return rec
