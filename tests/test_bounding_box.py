import math

import pytest

from ygl.bounding_box import BoundingBox
from ygl.matrix import Mat4
from ygl.ray import Ray
from ygl.vector import Vec3


@pytest.fixture
def unit_box():
    return BoundingBox(Vec3(0, 0, 0), Vec3(1, 1, 1))


def test_new_box_is_empty():
    box = BoundingBox()
    assert box.is_empty()
    assert box.volume() == 0.0


def test_expand_with_points():
    box = BoundingBox.from_points([Vec3(1, 2, 3), Vec3(-1, 0, 5)])
    assert box.min == Vec3(-1, 0, 3)
    assert box.max == Vec3(1, 2, 5)
    box.reset()
    assert box.is_empty()


def test_metrics(unit_box):
    assert unit_box.center() == Vec3(0.5, 0.5, 0.5)
    assert unit_box.volume() == pytest.approx(1.0)
    assert unit_box.surface_area() == pytest.approx(6.0)
    assert unit_box.half_size() * 2 == unit_box.size()


def test_max_dimension():
    box = BoundingBox(Vec3.zero(), Vec3(1, 5, 2))
    assert box.max_dimension() == 1


def test_contains_and_intersects(unit_box):
    assert unit_box.contains(Vec3(0.5, 0.5, 0.5))
    assert not unit_box.contains(Vec3(2, 0, 0))
    inner = BoundingBox(Vec3(0.2, 0.2, 0.2), Vec3(0.8, 0.8, 0.8))
    assert unit_box.contains(inner)
    assert unit_box.intersects(BoundingBox(Vec3(0.5, 0.5, 0.5), Vec3(3, 3, 3)))
    assert not unit_box.intersects(BoundingBox(Vec3(2, 2, 2), Vec3(3, 3, 3)))


def test_ray_hit_and_miss(unit_box):
    hit = unit_box.intersect_ray(Ray(Vec3(-1, 0.5, 0.5), Vec3(1, 0, 0)))
    assert hit == pytest.approx((1.0, 2.0))
    assert unit_box.intersect_ray(Ray(Vec3(-1, 5, 0.5), Vec3(1, 0, 0))) is None
    assert unit_box.intersect_ray(Ray(Vec3(-1, 0.5, 0.5), Vec3(1, 0, 0)), 0.0, 0.5) is None


def test_distance(unit_box):
    assert unit_box.distance_to(Vec3(0.5, 0.5, 0.5)) == 0.0
    assert unit_box.distance_to(Vec3(4, 0.5, 0.5)) == pytest.approx(3.0)
    other = BoundingBox(Vec3(3, 0, 0), Vec3(4, 1, 1))
    assert unit_box.distance_to(other) == pytest.approx(2.0)


def test_corners(unit_box):
    corners = unit_box.corners()
    assert len(set(corners)) == 8
    assert BoundingBox.from_points(corners) == unit_box


def test_transform_translation(unit_box):
    moved = unit_box.transform(Mat4.translation(Vec3(1, 2, 3)))
    assert moved.min == Vec3(1, 2, 3)
    assert moved.size() == unit_box.size()


def test_center_constructors_and_merge():
    c = Vec3(1, 1, 1)
    a = BoundingBox.from_center_and_size(c, Vec3(2, 2, 2))
    b = BoundingBox.from_center_and_half_size(c, Vec3(1, 1, 1))
    assert a == b
    m = BoundingBox.merge(a, BoundingBox(Vec3(5, 5, 5), Vec3(6, 6, 6)))
    assert m.contains(a) and m.max == Vec3(6, 6, 6)
    assert BoundingBox.merge(a, BoundingBox()) == a
    assert math.isclose(a.volume(), 8.0)