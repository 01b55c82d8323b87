"""Scene graph node with a local transform and children."""

from __future__ import annotations

import weakref
from typing import Optional

from .matrix import Mat4
from .quat import Quat
from .vector import Vec3


class Object3D:
    """A named node positioned by translation, rotation and scale."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.position = Vec3.zero()
        self.rotation = Quat.identity()
        self.scale = Vec3.one()
        self.visible = True
        self.children: list[Object3D] = []
        self._parent: Optional[weakref.ReferenceType[Object3D]] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def parent(self) -> Optional[Object3D]:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, parent: Optional[Object3D]) -> None:
        current = self.parent
        if current is parent:
            return
        if current is not None:
            current.remove_child(self)
        if parent is not None:
            parent.add_child(self)

    def translate(self, translation: Vec3) -> None:
        self.position = self.position + translation

    def rotate(self, rotation: Quat) -> None:
        self.rotation = (rotation * self.rotation).normalized()

    def scale_by(self, factor: Vec3 | float) -> None:
        self.scale = self.scale * factor

    def local_matrix(self) -> Mat4:
        return (
            Mat4.translation(self.position)
            @ self.rotation.to_matrix()
            @ Mat4.scaling(self.scale)
        )

    def world_matrix(self) -> Mat4:
        parent = self.parent
        local = self.local_matrix()
        return parent.world_matrix() @ local if parent is not None else local

    @property
    def world_position(self) -> Vec3:
        return self.world_matrix().transform_point(Vec3.zero())

    def add_child(self, child: Object3D) -> None:
        if child is self:
            raise ValueError("an object cannot be its own child")
        if child in self.children:
            return
        old = child.parent
        if old is not None:
            old.remove_child(child)
        self.children.append(child)
        child._parent = weakref.ref(self)

    def remove_child(self, child: Object3D | int) -> None:
        """Remove a child given as object or index; unknown children are ignored."""
        if isinstance(child, int):
            if not 0 <= child < len(self.children):
                return
            child = self.children[child]
        if child in self.children:
            self.children.remove(child)
            child._parent = None

    def clear_children(self) -> None:
        for child in self.children:
            child._parent = None
        self.children.clear()

    def update(self, delta_time: float) -> None:
        for child in list(self.children):
            child.update(delta_time)