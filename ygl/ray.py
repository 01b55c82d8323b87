"""Rays with a parametric validity interval."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .matrix import Mat4
from .vector import Vec3


@dataclass
class Ray:
    origin: Vec3 = field(default_factory=Vec3.zero)
    direction: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    t_min: float = 0.0
    t_max: float = math.inf

    def at(self, t: float) -> Vec3:
        return self.origin + self.direction * t

    __call__ = at

    def is_valid(self) -> bool:
        return not self.direction.is_zero() and self.t_min < self.t_max

    def transform(self, matrix: Mat4) -> Ray:
        return Ray(
            matrix.transform_point(self.origin),
            matrix.transform_direction(self.direction),
            self.t_min,
            self.t_max,
        )