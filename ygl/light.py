"""Light sources: directional, point, spot and rectangular area lights."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Any, Optional

from .vector import Vec3, clamp


class LightType(Enum):
    DIRECTIONAL = auto()
    POINT = auto()
    SPOT = auto()
    AREA = auto()


def _distance_falloff(constant: float, linear: float, quadratic: float,
                      light_range: float, distance: float) -> float:
    if light_range > 0.0 and distance > light_range:
        return 0.0
    return 1.0 / (constant + linear * distance + quadratic * distance * distance)


class Light:
    """Base light: a coloured emitter located at the origin with no falloff."""

    position: Vec3 = Vec3.zero()
    range: float = 0.0

    def __init__(self, light_type: LightType, color: Optional[Vec3] = None,
                 intensity: float = 1.0, name: str = "") -> None:
        self.type = light_type
        self.color = color if color is not None else Vec3.one()
        self.intensity = intensity
        self.name = name
        self.enabled = True
        self.cast_shadows = False
        self.scene: Any = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def direction_to(self, point: Vec3) -> Vec3:
        """Unit direction from the light's position towards ``point``."""
        return (point - self.position).normalized()

    def attenuation(self, distance: float) -> float:
        return 1.0

    def radiance(self, point: Vec3, normal: Vec3) -> Vec3:
        """Radiance arriving at ``point`` on a surface with ``normal``."""
        if not self.enabled:
            return Vec3.zero()
        direction = self.direction_to(point)
        n_dot_l = max(normal.dot(direction), 0.0)
        radiance = self.color * self.intensity * n_dot_l
        distance = (point - self.position).length()
        return radiance * self.attenuation(distance)

    def update(self, delta_time: float) -> None:
        """Advance the light by ``delta_time``; static lights do nothing."""


class DirectionalLight(Light):
    """A light infinitely far away shining along ``direction``."""

    def __init__(self, direction: Vec3, color: Optional[Vec3] = None,
                 intensity: float = 1.0, name: str = "") -> None:
        super().__init__(LightType.DIRECTIONAL, color, intensity, name)
        self.direction = direction

    @property
    def direction(self) -> Vec3:
        return self._direction

    @direction.setter
    def direction(self, value: Vec3) -> None:
        self._direction = value.normalized()

    def direction_to(self, point: Vec3) -> Vec3:
        return -self._direction


class PointLight(Light):
    """A light at ``position`` with constant, linear and quadratic falloff."""

    def __init__(self, position: Vec3, color: Optional[Vec3] = None,
                 intensity: float = 1.0, name: str = "") -> None:
        super().__init__(LightType.POINT, color, intensity, name)
        self.position = position
        self.constant_attenuation = 1.0
        self.linear_attenuation = 0.0
        self.quadratic_attenuation = 0.0
        self.range = 0.0

    def direction_to(self, point: Vec3) -> Vec3:
        return (point - self.position).normalized()

    def attenuation(self, distance: float) -> float:
        """Falloff factor; zero beyond a positive ``range``."""
        return _distance_falloff(self.constant_attenuation, self.linear_attenuation,
                                 self.quadratic_attenuation, self.range, distance)

    def set_attenuation(self, constant: float, linear: float, quadratic: float) -> None:
        self.constant_attenuation = constant
        self.linear_attenuation = linear
        self.quadratic_attenuation = quadratic


class SpotLight(Light):
    """A cone of light with a smooth falloff between inner and outer angles (degrees)."""

    def __init__(self, position: Vec3, direction: Vec3, color: Optional[Vec3] = None,
                 intensity: float = 1.0, inner_angle: float = 0.0,
                 outer_angle: float = 0.0, name: str = "") -> None:
        super().__init__(LightType.SPOT, color, intensity, name)
        self.position = position
        self.inner_angle = inner_angle
        self.outer_angle = outer_angle
        self.constant_attenuation = 1.0
        self.linear_attenuation = 0.0
        self.quadratic_attenuation = 0.0
        self.range = 0.0
        self.direction = direction

    def _update_cones(self) -> None:
        self.inner_cos = math.cos(math.radians(self.inner_angle))
        self.outer_cos = math.cos(math.radians(self.outer_angle))

    @property
    def direction(self) -> Vec3:
        return self._direction

    @direction.setter
    def direction(self, value: Vec3) -> None:
        self._direction = value.normalized()
        self._update_cones()

    def set_angles(self, inner: float, outer: float) -> None:
        self.inner_angle = inner
        self.outer_angle = outer
        self._update_cones()

    def direction_to(self, point: Vec3) -> Vec3:
        return (point - self.position).normalized()

    def attenuation(self, distance: float) -> float:
        return _distance_falloff(self.constant_attenuation, self.linear_attenuation,
                                 self.quadratic_attenuation, self.range, distance)

    def set_attenuation(self, constant: float, linear: float, quadratic: float) -> None:
        self.constant_attenuation = constant
        self.linear_attenuation = linear
        self.quadratic_attenuation = quadratic

    def radiance(self, point: Vec3, normal: Vec3) -> Vec3:
        if not self.enabled:
            return Vec3.zero()
        to_light = self.position - point
        light_dir = to_light.normalized()
        distance = to_light.length()

        cos_theta = light_dir.dot(self._direction)
        if cos_theta < self.outer_cos:
            return Vec3.zero()

        falloff = 1.0
        if cos_theta < self.inner_cos:
            falloff = clamp((cos_theta - self.outer_cos) / (self.inner_cos - self.outer_cos),
                            0.0, 1.0)

        n_dot_l = max(normal.dot(light_dir), 0.0)
        radiance = self.color * self.intensity * n_dot_l * falloff
        return radiance * self.attenuation(distance)


class AreaLight(Light):
    """A rectangular emitter spanned by the edge vectors ``u`` and ``v``."""

    def __init__(self, position: Vec3, u: Vec3, v: Vec3, color: Optional[Vec3] = None,
                 intensity: float = 1.0, name: str = "") -> None:
        super().__init__(LightType.AREA, color, intensity, name)
        self.position = position
        self.u_axis = u.normalized()
        self.v_axis = v.normalized()
        self.normal = u.cross(v).normalized()
        self.area = u.length() * v.length()

    def set_axes(self, u: Vec3, v: Vec3) -> None:
        self.u_axis = u.normalized()
        self.v_axis = v.normalized()
        self.normal = self.u_axis.cross(self.v_axis).normalized()
        self.area = u.length() * v.length()

    def radiance(self, point: Vec3, normal: Vec3) -> Vec3:
        if not self.enabled:
            return Vec3.zero()
        to_light = self.position - point
        distance = to_light.length()
        light_dir = to_light / distance

        n_dot_l = max(normal.dot(light_dir), 0.0)
        if n_dot_l <= 0.0:
            return Vec3.zero()

        attenuation = 1.0 / (distance * distance)
        return self.color * self.intensity * n_dot_l * attenuation * self.area