"""Surface model: the closed set of nine quadric-derived surface variants.

Each variant is an immutable dataclass holding exactly the coefficients of
its implicit equation. Construction validates the parameters and raises
InvalidParameters for non-positive radii, degenerate plane or quadric
coefficients, and non-finite values, so an invalid surface never exists.

The solver reads a surface through two members only:

- kind: the SurfaceKind tag used for dispatch inside Taichi kernels
- packed(): the coefficients as a fixed-length tuple of PACKED_SIZE floats

Example:
    >>> from csgsurface.geometry.surfaces import Sphere, make_surface
    >>> sphere = Sphere(x=0.0, y=0.0, z=0.0, radius=1.0)
    >>> cylinder = make_surface("z_axis_cylinder", 0.0, 0.0, 2.0)
"""

import math
from dataclasses import astuple, dataclass, fields
from enum import IntEnum
from typing import ClassVar

# Number of floats a surface packs into for kernel dispatch (quadric A..K)
PACKED_SIZE = 10


class InvalidParameters(ValueError):
    """Raised when surface parameters do not describe a real surface."""


class SurfaceKind(IntEnum):
    """Enumeration of supported surface variants.

    Used for surface dispatch in the distance kernels.
    """

    SPHERE = 0
    X_PLANE = 1
    Y_PLANE = 2
    Z_PLANE = 3
    PLANE = 4
    X_AXIS_CYLINDER = 5
    Y_AXIS_CYLINDER = 6
    Z_AXIS_CYLINDER = 7
    QUADRIC = 8


def _check_finite(surface) -> None:
    for f in fields(surface):
        value = getattr(surface, f.name)
        if not math.isfinite(value):
            raise InvalidParameters(
                f"{type(surface).__name__}.{f.name} = {value} is not a finite number."
            )


def _check_radius(surface) -> None:
    if surface.radius <= 0.0:
        raise InvalidParameters(
            f"{type(surface).__name__} radius = {surface.radius} must be positive."
        )


@dataclass(frozen=True)
class Surface:
    """Base class of the surface variants.

    Subclasses are frozen dataclasses whose fields, in declaration order,
    are the coefficients passed to the kernels.
    """

    kind: ClassVar[SurfaceKind]

    def __post_init__(self) -> None:
        # Coerce ints and numpy scalars to plain floats
        for f in fields(self):
            value = getattr(self, f.name)
            try:
                value = float(value)
            except (TypeError, ValueError) as err:
                raise InvalidParameters(
                    f"{type(self).__name__}.{f.name} = {value!r} is not a number."
                ) from err
            object.__setattr__(self, f.name, value)
        _check_finite(self)
        self.validate()

    def validate(self) -> None:
        """Check variant-specific invariants, raising InvalidParameters."""

    def packed(self) -> tuple[float, ...]:
        """Return the coefficients zero-padded to PACKED_SIZE floats."""
        values = astuple(self)
        return values + (0.0,) * (PACKED_SIZE - len(values))


@dataclass(frozen=True)
class Sphere(Surface):
    """Sphere (X-x)^2 + (Y-y)^2 + (Z-z)^2 = radius^2."""

    kind: ClassVar[SurfaceKind] = SurfaceKind.SPHERE

    x: float
    y: float
    z: float
    radius: float

    def validate(self) -> None:
        _check_radius(self)


@dataclass(frozen=True)
class XPlane(Surface):
    """Plane X = x."""

    kind: ClassVar[SurfaceKind] = SurfaceKind.X_PLANE

    x: float


@dataclass(frozen=True)
class YPlane(Surface):
    """Plane Y = y."""

    kind: ClassVar[SurfaceKind] = SurfaceKind.Y_PLANE

    y: float


@dataclass(frozen=True)
class ZPlane(Surface):
    """Plane Z = z."""

    kind: ClassVar[SurfaceKind] = SurfaceKind.Z_PLANE

    z: float


@dataclass(frozen=True)
class Plane(Surface):
    """General plane aX + bY + cZ + d = 0.

    The normal-like coefficients (a, b, c) need not be normalized but must
    not all be zero.
    """

    kind: ClassVar[SurfaceKind] = SurfaceKind.PLANE

    a: float
    b: float
    c: float
    d: float

    def validate(self) -> None:
        if self.a == 0.0 and self.b == 0.0 and self.c == 0.0:
            raise InvalidParameters(
                "Plane coefficients a, b, c are all zero; this is not a plane."
            )


@dataclass(frozen=True)
class XAxisCylinder(Surface):
    """Cylinder parallel to the X axis: (Y-y)^2 + (Z-z)^2 = radius^2."""

    kind: ClassVar[SurfaceKind] = SurfaceKind.X_AXIS_CYLINDER

    y: float
    z: float
    radius: float

    def validate(self) -> None:
        _check_radius(self)


@dataclass(frozen=True)
class YAxisCylinder(Surface):
    """Cylinder parallel to the Y axis: (X-x)^2 + (Z-z)^2 = radius^2."""

    kind: ClassVar[SurfaceKind] = SurfaceKind.Y_AXIS_CYLINDER

    x: float
    z: float
    radius: float

    def validate(self) -> None:
        _check_radius(self)


@dataclass(frozen=True)
class ZAxisCylinder(Surface):
    """Cylinder parallel to the Z axis: (X-x)^2 + (Y-y)^2 = radius^2."""

    kind: ClassVar[SurfaceKind] = SurfaceKind.Z_AXIS_CYLINDER

    x: float
    y: float
    radius: float

    def validate(self) -> None:
        _check_radius(self)


@dataclass(frozen=True)
class Quadric(Surface):
    """General quadric.

    Ax^2 + By^2 + Cz^2 + Dxy + Eyz + Fxz + Gx + Hy + Jz + K = 0, with the
    coefficients stored lower-case. At least one of the quadratic or linear
    coefficients (a through j) must be non-zero; k alone is no surface.
    """

    kind: ClassVar[SurfaceKind] = SurfaceKind.QUADRIC

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float
    g: float
    h: float
    j: float
    k: float

    def validate(self) -> None:
        if not any(astuple(self)[:9]):
            raise InvalidParameters(
                "Quadric coefficients A through J are all zero; this is not a surface."
            )


SURFACE_TYPES: dict[SurfaceKind, type[Surface]] = {
    SurfaceKind.SPHERE: Sphere,
    SurfaceKind.X_PLANE: XPlane,
    SurfaceKind.Y_PLANE: YPlane,
    SurfaceKind.Z_PLANE: ZPlane,
    SurfaceKind.PLANE: Plane,
    SurfaceKind.X_AXIS_CYLINDER: XAxisCylinder,
    SurfaceKind.Y_AXIS_CYLINDER: YAxisCylinder,
    SurfaceKind.Z_AXIS_CYLINDER: ZAxisCylinder,
    SurfaceKind.QUADRIC: Quadric,
}


def make_surface(kind: SurfaceKind | str | int, *coefficients: float) -> Surface:
    """Construct a surface variant from its kind and coefficients.

    Args:
        kind: A SurfaceKind, its integer value, or its name in any case
            (e.g. "sphere", "Z_AXIS_CYLINDER").
        *coefficients: The variant's coefficients in declaration order,
            e.g. (x, y, z, radius) for a sphere.

    Returns:
        The constructed surface.

    Raises:
        InvalidParameters: If the kind is unknown, the coefficient count is
            wrong, or the coefficients describe a degenerate surface.
    """
    if isinstance(kind, str):
        try:
            kind = SurfaceKind[kind.strip().upper().replace("-", "_")]
        except KeyError:
            raise InvalidParameters(f"Unknown surface kind: {kind}") from None
    else:
        try:
            kind = SurfaceKind(kind)
        except ValueError:
            raise InvalidParameters(f"Unknown surface kind: {kind}") from None

    cls = SURFACE_TYPES[kind]
    expected = len(fields(cls))
    if len(coefficients) != expected:
        raise InvalidParameters(
            f"{cls.__name__} takes {expected} coefficients, got {len(coefficients)}."
        )
    return cls(*coefficients)
