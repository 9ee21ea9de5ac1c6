"""Three-component vectors and axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector.

    ``a * b`` between two vectors is the inner product, ``a ^ b`` the cross
    product; ordering comparisons compare magnitudes.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, other: object):
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, Real):
            s = float(other)
            return Vector(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Vector:
        if not isinstance(other, Real):
            return NotImplemented
        s = float(other)
        return Vector(self.x / s, self.y / s, self.z / s)

    def __xor__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.cross(other)

    def dot(self, other: Vector) -> float:
        """Inner product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Cross product."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def unit_vector(self) -> Vector:
        """The vector scaled to unit length."""
        return self / self.magnitude()

    def is_zero(self) -> bool:
        """True when every component is exactly zero."""
        return self.x == 0 and self.y == 0 and self.z == 0

    def is_parallel(self, other: Vector) -> bool:
        """True when the two vectors are exactly parallel or anti-parallel."""
        return abs(self.dot(other)) == other.magnitude() * self.magnitude()

    def rotate(self, axis: Vector, theta: float) -> Vector:
        """Rotate about a unit ``axis`` by ``theta`` radians."""
        c = math.cos(theta)
        s = math.sin(theta)
        va = axis.dot(self)
        vca = axis.cross(self)
        return self * c + axis * (va * (1.0 - c)) + vca * s

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.magnitude() < other.magnitude()

    def __le__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.magnitude() <= other.magnitude()

    def __gt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.magnitude() > other.magnitude()

    def __ge__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.magnitude() >= other.magnitude()

    def __str__(self) -> str:
        return "Vector(%g,%g,%g)" % (self.x, self.y, self.z)


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box given by its lower-left and upper-right corners."""

    llc: Vector = field(default_factory=Vector)
    urc: Vector = field(default_factory=Vector)