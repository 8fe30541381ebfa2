"""Plain 3-component value types returned by curve evaluation.

Point3D is a location, Vector3D is a direction with magnitude. Both are
frozen so they can be shared freely between threads.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Vector3D:
    """A direction in 3D space. Magnitude is meaningful (speed for tangents)."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        """Unit vector in the same direction. The zero vector maps to itself."""
        length = self.norm()
        if length > 0:
            return Vector3D(self.x / length, self.y / length, self.z / length)
        return Vector3D(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Point3D:
    """A position in 3D space."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, offset: Vector3D) -> Point3D:
        if not isinstance(offset, Vector3D):
            return NotImplemented
        return Point3D(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __sub__(self, other: Point3D) -> Vector3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_to(self, other: Point3D) -> float:
        return (self - other).norm()

    def to_vector(self) -> Vector3D:
        """Position vector from the origin."""
        return Vector3D(self.x, self.y, self.z)


__all__ = ["Point3D", "Vector3D"]
