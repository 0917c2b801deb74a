"""Small 2D/3D vector, quaternion and transform types used by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec2:
        if isinstance(other, Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the vector scaled to unit length."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError("cannot normalize a zero-length or non-finite vector")
        return Vec2(self.x / length, self.y / length)

    def extend(self, z: float) -> Vec3:
        """Return a 3D vector with this vector's x and y and the given z."""
        return Vec3(self.x, self.y, z)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)


@dataclass(frozen=True)
class Vec3:
    """An immutable three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec3:
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def _cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def truncate(self) -> Vec2:
        """Drop the z component."""
        return Vec2(self.x, self.y)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Quat:
    """An immutable rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar[Quat]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def from_rotation_z(cls, angle: float) -> Quat:
        """A rotation of ``angle`` radians about the z axis."""
        half = angle * 0.5
        return cls(0.0, 0.0, math.sin(half), math.cos(half))

    def __mul__(self, other: object) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        x1, y1, z1, w1 = self
        x2, y2, z2, w2 = other
        return Quat(
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        )

    def mul_vec3(self, vector: Vec3) -> Vec3:
        """Rotate ``vector`` by this quaternion."""
        axis = Vec3(self.x, self.y, self.z)
        twice_cross = axis._cross(vector) * 2.0
        return vector + twice_cross * self.w + axis._cross(twice_cross)


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


@dataclass
class Transform:
    """Position, orientation and scale of an object in the world."""

    translation: Vec3 = field(default_factory=lambda: Vec3.ZERO)
    rotation: Quat = field(default_factory=lambda: Quat.IDENTITY)
    scale: Vec3 = field(default_factory=lambda: Vec3.ONE)

    @classmethod
    def from_translation(cls, translation: Vec3) -> Transform:
        """A transform at ``translation`` with no rotation and unit scale."""
        return cls(translation=translation)