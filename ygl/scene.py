"""A scene: objects, lights and animations under one root."""

from __future__ import annotations

from typing import Optional

from .animation import Animation
from .bounding_box import BoundingBox
from .light import Light
from .object3d import Object3D


def _local_bounds(obj: Object3D) -> Optional[BoundingBox]:
    """The object's own bounding box, if it carries one."""
    value = getattr(obj, "bounding_box", None)
    if callable(value):
        value = value()
    return value if isinstance(value, BoundingBox) else None


class Scene(Object3D):
    """Holds scene objects, lights and animations and keeps world bounds."""

    def __init__(self, name: str = "Scene", root: Optional[Object3D] = None) -> None:
        super().__init__(name)
        self.root: Optional[Object3D] = root if root is not None else Object3D()
        self.bounding_box = BoundingBox()
        self.objects: list[Object3D] = []
        self.lights: list[Light] = []
        self.animations: list[Animation] = []

    # Objects

    def add_object(self, obj: Optional[Object3D]) -> None:
        if obj is None:
            return
        self.objects.append(obj)
        obj.scene = self
        self.update_bounding_box()

    def remove_object(self, obj: Object3D) -> None:
        """Remove ``obj``; objects not in the scene are ignored."""
        if obj in self.objects:
            self.objects.remove(obj)
            obj.scene = None
            self.update_bounding_box()

    def remove_object_at(self, index: int) -> None:
        if 0 <= index < len(self.objects):
            obj = self.objects.pop(index)
            obj.scene = None
            self.update_bounding_box()

    def clear_objects(self) -> None:
        for obj in self.objects:
            obj.scene = None
        self.objects.clear()
        self.update_bounding_box()

    def find_object(self, name: str) -> Optional[Object3D]:
        return next((o for o in self.objects if o.name == name), None)

    # Lights

    def add_light(self, light: Optional[Light]) -> None:
        if light is None:
            return
        self.lights.append(light)
        light.scene = self

    def remove_light(self, light: Light) -> None:
        if light in self.lights:
            self.lights.remove(light)
            light.scene = None

    def remove_light_at(self, index: int) -> None:
        if 0 <= index < len(self.lights):
            self.lights.pop(index).scene = None

    def clear_lights(self) -> None:
        for light in self.lights:
            light.scene = None
        self.lights.clear()

    def find_light(self, name: str) -> Optional[Light]:
        return next((light for light in self.lights if light.name == name), None)

    # Animations

    def add_animation(self, animation: Optional[Animation]) -> None:
        if animation is not None:
            self.animations.append(animation)

    def remove_animation(self, animation: Animation) -> None:
        if animation in self.animations:
            self.animations.remove(animation)

    def remove_animation_at(self, index: int) -> None:
        if 0 <= index < len(self.animations):
            del self.animations[index]

    def clear_animations(self) -> None:
        self.animations.clear()

    # Root and bounds

    def set_root(self, root: Optional[Object3D]) -> None:
        self.root = root
        if root is not None:
            root.scene = self

    def update_bounding_box(self) -> None:
        """Recompute the world-space bounds of every object that has bounds."""
        box = BoundingBox()
        for obj in self.objects:
            local = _local_bounds(obj)
            if local is None or local.is_empty():
                continue
            box.expand(local.transform(obj.world_matrix()))
        self.bounding_box.min = box.min
        self.bounding_box.max = box.max

    # Update

    def update(self, delta_time: float) -> None:
        """Advance animations, then objects, then lights."""
        for animation in self.animations:
            animation.update(delta_time)
        for obj in self.objects:
            obj.update(delta_time)
        for light in self.lights:
            light.update(delta_time)