"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .matrix import Mat4
from .ray import Ray
from .vector import Vec3


def _empty_min() -> Vec3:
    return Vec3.splat(math.inf)


def _empty_max() -> Vec3:
    return Vec3.splat(-math.inf)


@dataclass
class BoundingBox:
    """A box from ``min`` to ``max``; a fresh box is empty."""

    min: Vec3 = field(default_factory=_empty_min)
    max: Vec3 = field(default_factory=_empty_max)

    def reset(self) -> None:
        self.min, self.max = _empty_min(), _empty_max()

    def is_empty(self) -> bool:
        return any(a > b for a, b in zip(self.min, self.max))

    def center(self) -> Vec3:
        return (self.min + self.max) * 0.5

    def size(self) -> Vec3:
        return self.max - self.min

    def half_size(self) -> Vec3:
        return self.size() * 0.5

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def depth(self) -> float:
        return self.max.z - self.min.z

    def volume(self) -> float:
        if self.is_empty():
            return 0.0
        return self.width * self.height * self.depth

    def surface_area(self) -> float:
        if self.is_empty():
            return 0.0
        w, h, d = self.width, self.height, self.depth
        return 2.0 * (w * h + w * d + h * d)

    def max_dimension(self) -> int:
        """Index (0, 1, 2) of the longest axis."""
        s = self.size()
        return max(range(3), key=lambda i: s[i])

    def expand(self, other: Vec3 | BoundingBox) -> None:
        if isinstance(other, BoundingBox):
            if other.is_empty():
                return
            self.min = Vec3.minimum(self.min, other.min)
            self.max = Vec3.maximum(self.max, other.max)
        else:
            self.min = Vec3.minimum(self.min, other)
            self.max = Vec3.maximum(self.max, other)

    def contains(self, other: Vec3 | BoundingBox) -> bool:
        if isinstance(other, BoundingBox):
            return self.contains(other.min) and self.contains(other.max)
        return all(lo <= p <= hi for lo, p, hi in zip(self.min, other, self.max))

    def intersects(self, other: BoundingBox) -> bool:
        return all(
            a_lo <= b_hi and b_lo <= a_hi
            for a_lo, a_hi, b_lo, b_hi in zip(self.min, self.max, other.min, other.max)
        )

    def intersect_ray(self, ray: Ray, t_min: float | None = None,
                      t_max: float | None = None) -> tuple[float, float] | None:
        """Slab test; returns the entry and exit parameters, or None on a miss."""
        lo = ray.t_min if t_min is None else t_min
        hi = ray.t_max if t_max is None else t_max
        for o, d, bmin, bmax in zip(ray.origin, ray.direction, self.min, self.max):
            if d == 0.0:
                if o < bmin or o > bmax:
                    return None
                continue
            t0, t1 = (bmin - o) / d, (bmax - o) / d
            if t0 > t1:
                t0, t1 = t1, t0
            lo, hi = max(lo, t0), min(hi, t1)
            if lo > hi:
                return None
        return lo, hi

    def distance_to(self, other: Vec3 | BoundingBox) -> float:
        if isinstance(other, BoundingBox):
            gaps = (
                max(0.0, b_lo - a_hi, a_lo - b_hi)
                for a_lo, a_hi, b_lo, b_hi in zip(self.min, self.max, other.min, other.max)
            )
        else:
            gaps = (max(0.0, lo - p, p - hi) for lo, p, hi in zip(self.min, other, self.max))
        return math.sqrt(sum(g * g for g in gaps))

    def corners(self) -> list[Vec3]:
        lo, hi = self.min, self.max
        return [
            Vec3(x, y, z)
            for x in (lo.x, hi.x)
            for y in (lo.y, hi.y)
            for z in (lo.z, hi.z)
        ]

    def transform(self, matrix: Mat4) -> BoundingBox:
        if self.is_empty():
            return BoundingBox()
        return BoundingBox.from_points(matrix.transform_point(c) for c in self.corners())

    @staticmethod
    def from_points(points: Iterable[Vec3]) -> BoundingBox:
        box = BoundingBox()
        for p in points:
            box.expand(p)
        return box

    @staticmethod
    def from_center_and_size(center: Vec3, size: Vec3) -> BoundingBox:
        return BoundingBox.from_center_and_half_size(center, size * 0.5)

    @staticmethod
    def from_center_and_half_size(center: Vec3, half_size: Vec3) -> BoundingBox:
        return BoundingBox(center - half_size, center + half_size)

    @staticmethod
    def merge(a: BoundingBox, b: BoundingBox) -> BoundingBox:
        box = BoundingBox(a.min, a.max)
        box.expand(b)
        return box

    def __str__(self) -> str:
        return f"BoundingBox(min={tuple(self.min)}, max={tuple(self.max)})"