"""Small immutable 2, 3 and 4 component float vectors and scalar helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, TypeVar

T = TypeVar("T")


def lerp(a: T, b: T, t: float) -> T:
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t  # type: ignore[operator]


def clamp(value, low, high):
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def is_zero(value: float, epsilon: float = 1e-6) -> bool:
    """True when ``value`` is within ``epsilon`` of zero."""
    return abs(value) < epsilon


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    @property
    def u(self) -> float:
        return self.x

    @property
    def v(self) -> float:
        return self.y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec2:
        n = self.length()
        return self / n if n > 0.0 else self

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vec2:
        return cls(1.0, 1.0)

    @classmethod
    def unit_x(cls) -> Vec2:
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vec2:
        return cls(0.0, 1.0)


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec3:
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec3:
        n = self.length()
        return self / n if n > 0.0 else self

    def is_zero(self, epsilon: float = 1e-6) -> bool:
        return self.length_squared() < epsilon * epsilon

    @staticmethod
    def minimum(a: Vec3, b: Vec3) -> Vec3:
        return Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))

    @staticmethod
    def maximum(a: Vec3, b: Vec3) -> Vec3:
        return Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    @staticmethod
    def clamp(v: Vec3, low: Vec3, high: Vec3) -> Vec3:
        return Vec3.maximum(low, Vec3.minimum(high, v))

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Vec4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_vec3(cls, v: Vec3, w: float) -> Vec4:
        return cls(v.x, v.y, v.z, w)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z, self.w)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Vec4:
        return Vec4(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec4:
        return Vec4(*(a / scalar for a in self))

    def dot(self, other: Vec4) -> float:
        return sum(a * b for a, b in zip(self, other))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec4:
        n = self.length()
        return self / n if n > 0.0 else self

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @classmethod
    def zero(cls) -> Vec4:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec4:
        return cls(1.0, 1.0, 1.0, 1.0)