"""Vector, quaternion and projection value types used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

Scalar = Union[int, float]


def to_radian(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def to_degree(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / math.pi


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


@dataclass(frozen=True)
class PersProjInfo:
    """Parameters of a perspective projection; ``fov`` is in degrees."""

    fov: float
    width: float
    height: float
    z_near: float
    z_far: float


@dataclass(frozen=True)
class OrthoProjInfo:
    """Bounds of an orthographic projection volume."""

    right: float
    left: float
    bottom: float
    top: float
    near: float
    far: float


@dataclass(frozen=True)
class Vector2:
    """A two-component vector."""

    x: Scalar = 0
    y: Scalar = 0

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: object) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: Scalar = 0
    y: Scalar = 0
    z: Scalar = 0

    ZERO: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    UP: ClassVar[Vector3]
    RIGHT: ClassVar[Vector3]
    FORWARD: ClassVar[Vector3]

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: object) -> Vector3:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: object) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector3:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self / self.length()

    def rotated(self, angle: float, axis: Vector3) -> Vector3:
        """Return this vector rotated by ``angle`` degrees around ``axis``."""
        half = to_radian(angle / 2)
        sin_half = math.sin(half)
        rotation = Quaternion(
            axis.x * sin_half, axis.y * sin_half, axis.z * sin_half, math.cos(half)
        )
        result = rotation * self * rotation.conjugate()
        return Vector3(result.x, result.y, result.z)


Vector3.ZERO = Vector3(0, 0, 0)
Vector3.ONE = Vector3(1, 1, 1)
Vector3.UP = Vector3(0, 1, 0)
Vector3.RIGHT = Vector3(1, 0, 0)
Vector3.FORWARD = Vector3(0, 0, 1)


@dataclass(frozen=True)
class Vector4:
    """A four-component vector."""

    x: Scalar = 0
    y: Scalar = 0
    z: Scalar = 0
    w: Scalar = 0

    ZERO: ClassVar[Vector4]
    ONE: ClassVar[Vector4]

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: object) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: object) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: object) -> Vector4:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: object) -> Vector4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector4:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(sum(c * c for c in self))

    def normalized(self) -> Vector4:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self / self.length()


Vector4.ZERO = Vector4(0, 0, 0, 0)
Vector4.ONE = Vector4(1, 1, 1, 1)


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with vector part ``(x, y, z)`` and scalar part ``w``."""

    x: float
    y: float
    z: float
    w: float

    IDENTITY: ClassVar[Quaternion]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __mul__(self, other: object) -> Quaternion:
        """Hamilton product with a quaternion, or with a pure vector."""
        if isinstance(other, Quaternion):
            l, r = self, other
            return Quaternion(
                l.x * r.w + l.w * r.x + l.y * r.z - l.z * r.y,
                l.y * r.w + l.w * r.y + l.z * r.x - l.x * r.z,
                l.z * r.w + l.w * r.z + l.x * r.y - l.y * r.x,
                l.w * r.w - l.x * r.x - l.y * r.y - l.z * r.z,
            )
        if isinstance(other, Vector3):
            q, v = self, other
            return Quaternion(
                q.w * v.x + q.y * v.z - q.z * v.y,
                q.w * v.y + q.z * v.x - q.x * v.z,
                q.w * v.z + q.x * v.y - q.y * v.x,
                -(q.x * v.x) - q.y * v.y - q.z * v.z,
            )
        return NotImplemented

    def normalized(self) -> Quaternion:
        """Return the quaternion scaled to unit length.

        Raises ZeroDivisionError for the zero quaternion.
        """
        length = math.sqrt(sum(c * c for c in self))
        return Quaternion(self.x / length, self.y / length, self.z / length, self.w / length)

    def conjugate(self) -> Quaternion:
        """Return the conjugate, with the vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def to_degrees(self) -> Vector3:
        """Return three angles in degrees derived from the quaternion.

        Raises ValueError when the quaternion's squared norm exceeds one.
        """
        x, y, z, w = self
        first = math.atan2(x * z + y * w, x * w - y * z)
        second = math.acos(-x * x - y * y - z * z - w * w)
        third = math.atan2(x * z - y * w, x * w + y * z)
        return Vector3(to_degree(first), to_degree(second), to_degree(third))


Quaternion.IDENTITY = Quaternion(0, 0, 0, 1)