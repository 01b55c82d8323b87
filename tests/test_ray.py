import math

from ygl.matrix import Mat4
from ygl.ray import Ray
from ygl.vector import Vec3


def test_at_and_call():
    r = Ray(Vec3(1, 0, 0), Vec3(0, 2, 0))
    assert r.at(0) == r.origin
    assert r(1.5) == Vec3(1, 3, 0)


def test_validity():
    assert Ray(Vec3.zero(), Vec3.unit_x()).is_valid()
    assert not Ray(Vec3.zero(), Vec3.zero()).is_valid()
    assert not Ray(Vec3.zero(), Vec3.unit_x(), 5.0, 1.0).is_valid()


def test_default_bounds():
    r = Ray()
    assert r.t_min == 0.0 and math.isinf(r.t_max)


def test_transform():
    r = Ray(Vec3.zero(), Vec3.unit_x(), 0.5, 10.0)
    t = r.transform(Mat4.translation(Vec3(0, 5, 0)))
    assert t.origin == Vec3(0, 5, 0)
    assert t.direction == Vec3.unit_x()
    assert (t.t_min, t.t_max) == (0.5, 10.0)