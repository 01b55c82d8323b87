"""Triangles and a bounding volume hierarchy for ray queries."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .bounding_box import BoundingBox
from .ray import Ray
from .vector import Vec2, Vec3

_EPSILON = 1e-9
_LEAF_SIZE = 2


@dataclass
class Triangle:
    v0: Vec3 = field(default_factory=Vec3.zero)
    v1: Vec3 = field(default_factory=Vec3.zero)
    v2: Vec3 = field(default_factory=Vec3.zero)
    n0: Vec3 = field(default_factory=Vec3.zero)
    n1: Vec3 = field(default_factory=Vec3.zero)
    n2: Vec3 = field(default_factory=Vec3.zero)
    t0: Vec2 = field(default_factory=Vec2.zero)
    t1: Vec2 = field(default_factory=Vec2.zero)
    t2: Vec2 = field(default_factory=Vec2.zero)
    material_id: int = 0
    mesh_id: int = 0
    face_id: int = 0

    def centroid(self) -> Vec3:
        return (self.v0 + self.v1 + self.v2) / 3.0

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points((self.v0, self.v1, self.v2))

    def normal(self) -> Vec3:
        return (self.v1 - self.v0).cross(self.v2 - self.v0).normalized()

    def intersect(self, ray: Ray, t_min: Optional[float] = None,
                  t_max: Optional[float] = None) -> Optional[tuple[float, Vec2]]:
        """Return ``(t, barycentric)`` of the hit within the bounds, or None."""
        lo = ray.t_min if t_min is None else t_min
        hi = ray.t_max if t_max is None else t_max
        e1 = self.v1 - self.v0
        e2 = self.v2 - self.v0
        p = ray.direction.cross(e2)
        det = e1.dot(p)
        if abs(det) < _EPSILON:
            return None
        inv = 1.0 / det
        s = ray.origin - self.v0
        u = s.dot(p) * inv
        if u < 0.0 or u > 1.0:
            return None
        q = s.cross(e1)
        v = ray.direction.dot(q) * inv
        if v < 0.0 or u + v > 1.0:
            return None
        t = e2.dot(q) * inv
        if t < lo or t > hi:
            return None
        return t, Vec2(u, v)


@dataclass
class BVHNode:
    """Inner nodes name two children; leaves name a run of primitives."""

    bounds: BoundingBox = field(default_factory=BoundingBox)
    left: int = 0
    right: int = 0
    first: int = 0
    count: int = 0

    def is_leaf(self) -> bool:
        return self.count > 0


def _union(boxes: Iterable[BoundingBox]) -> BoundingBox:
    box = BoundingBox()
    for b in boxes:
        box.expand(b)
    return box


def _split_axis(centroid_bounds: BoundingBox) -> int:
    if centroid_bounds.max.x == centroid_bounds.min.x:
        return 1
    if centroid_bounds.max.y == centroid_bounds.min.y:
        return 2
    return 0


class BVH:
    """Median-split hierarchy over a list of triangles."""

    def __init__(self) -> None:
        self.nodes: list[BVHNode] = []
        self.triangles: list[Triangle] = []
        self.build_time = 0.0
        self._order: list[int] = []

    @property
    def root(self) -> BVHNode:
        if not self.nodes:
            raise ValueError("BVH has not been built")
        return self.nodes[0]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def clear(self) -> None:
        self.nodes = []
        self.triangles = []
        self._order = []
        self.build_time = 0.0

    def build(self, triangles: Iterable[Triangle]) -> None:
        """Build the hierarchy; an empty input leaves the BVH empty."""
        tris = list(triangles)
        self.clear()
        if not tris:
            return
        start = time.perf_counter()

        self.triangles = tris
        self._order = list(range(len(tris)))
        boxes = [t.bounding_box() for t in tris]
        sums = [t.v0 + t.v1 + t.v2 for t in tris]

        self.nodes = [BVHNode(_union(boxes), first=0, count=len(tris))]
        index = 0
        while index < len(self.nodes):
            node = self.nodes[index]
            index += 1
            if node.count <= _LEAF_SIZE:
                continue

            first, end = node.first, node.first + node.count
            span = self._order[first:end]
            centroid_bounds = BoundingBox.from_points(sums[k] / 3.0 for k in span)
            axis = _split_axis(centroid_bounds)
            span.sort(key=lambda k: sums[k][axis])
            self._order[first:end] = span
            mid = first + node.count // 2

            left = BVHNode(_union(boxes[k] for k in self._order[first:mid]),
                           first=first, count=mid - first)
            right = BVHNode(_union(boxes[k] for k in self._order[mid:end]),
                            first=mid, count=end - mid)
            node.left = len(self.nodes)
            self.nodes.append(left)
            node.right = len(self.nodes)
            self.nodes.append(right)
            node.count = 0

        self.build_time = time.perf_counter() - start

    def calculate_sah(self, box: BoundingBox, count: int) -> float:
        return 2.0 * box.surface_area() * count

    def intersect(self, ray: Ray, t_min: Optional[float] = None,
                  t_max: Optional[float] = None) -> Optional[tuple[float, int]]:
        """Closest hit as ``(t, triangle index)``, or None."""
        if not self.nodes:
            return None
        lo = ray.t_min if t_min is None else t_min
        closest = ray.t_max if t_max is None else t_max
        best: Optional[tuple[float, int]] = None
        stack = [0]
        while stack:
            node = self.nodes[stack.pop()]
            if node.bounds.intersect_ray(ray, lo, closest) is None:
                continue
            if node.is_leaf():
                for k in self._order[node.first:node.first + node.count]:
                    hit = self.triangles[k].intersect(ray, lo, closest)
                    if hit is not None and (best is None or hit[0] < best[0]):
                        best = (hit[0], k)
                        closest = hit[0]
            else:
                stack.append(node.right)
                stack.append(node.left)
        return best