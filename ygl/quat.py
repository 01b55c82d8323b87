"""Unit quaternions for rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .matrix import Mat4
from .vector import Vec3


@dataclass(frozen=True)
class Quat:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quat:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians around ``axis``."""
        a = axis.normalized()
        s = math.sin(angle / 2.0)
        return cls(a.x * s, a.y * s, a.z * s, math.cos(angle / 2.0))

    def __iter__(self):
        yield from (self.x, self.y, self.z, self.w)

    def __add__(self, other: Quat) -> Quat:
        return Quat(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Quat) -> Quat:
        return Quat(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        if isinstance(other, Quat):
            x1, y1, z1, w1 = self
            x2, y2, z2, w2 = other
            return Quat(
                w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            )
        if isinstance(other, Vec3):
            return self.rotate(other)
        return Quat(*(a * other for a in self))

    def __rmul__(self, scalar: float) -> Quat:
        return Quat(*(a * scalar for a in self))

    def dot(self, other: Quat) -> float:
        return sum(a * b for a, b in zip(self, other))

    def conjugate(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    def normalized(self) -> Quat:
        n = math.sqrt(self.dot(self))
        if n == 0.0:
            return Quat.identity()
        return Quat(*(a / n for a in self))

    def rotate(self, vec: Vec3) -> Vec3:
        q = self * Quat(vec.x, vec.y, vec.z, 0.0) * self.conjugate()
        return Vec3(q.x, q.y, q.z)

    def to_matrix(self) -> Mat4:
        x, y, z, w = self.normalized()
        return Mat4.from_rows([
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w), 0],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w), 0],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y), 0],
            [0, 0, 0, 1],
        ])


def slerp(a: Quat, b: Quat, t: float) -> Quat:
    """Spherical interpolation along the shortest arc."""
    d = a.dot(b)
    if d < 0.0:
        b, d = -b, -d
    if d > 0.9995:
        return (a + (b - a) * t).normalized()
    theta = math.acos(max(-1.0, min(1.0, d)))
    s = math.sin(theta)
    return (a * (math.sin((1 - t) * theta) / s) + b * (math.sin(t * theta) / s)).normalized()