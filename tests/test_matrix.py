import math

import pytest

from ygl.matrix import Mat4
from ygl.vector import Vec3, Vec4


def close(a: Vec3, b: Vec3) -> bool:
    return all(math.isclose(x, y, abs_tol=1e-6) for x, y in zip(a, b))


def test_identity_keeps_points():
    p = Vec3(1, -2, 3)
    assert Mat4.identity().transform_point(p) == p
    assert Mat4.identity().determinant() == pytest.approx(1.0)


def test_translation_moves_points_not_directions():
    m = Mat4.translation(Vec3(1, 2, 3))
    assert m.transform_point(Vec3.zero()) == Vec3(1, 2, 3)
    assert m.transform_direction(Vec3(1, 0, 0)) == Vec3(1, 0, 0)


def test_rotation_z_quarter_turn():
    z_result = Mat4.rotation_z(math.pi / 2).transform_point(Vec3.unit_x())
    x_result = Mat4.rotation_x(math.pi / 2).transform_point(Vec3.unit_y())
    y_result = Mat4.rotation_y(math.pi / 2).transform_point(Vec3.unit_z())
    assert list(z_result) == pytest.approx([0.0, 1.0, 0.0], abs=1e-6)
    assert list(x_result) == pytest.approx([0.0, 0.0, 1.0], abs=1e-6)
    assert list(y_result) == pytest.approx([1.0, 0.0, 0.0], abs=1e-6)


def test_inverse_round_trip():
    m = Mat4.translation(Vec3(1, 2, 3)) @ Mat4.rotation_y(0.7) @ Mat4.scaling(Vec3(2, 3, 4))
    assert (m @ m.inverted()).is_close(Mat4.identity())
    assert m.determinant() == pytest.approx(24.0)


def test_singular_raises():
    with pytest.raises(ValueError):
        Mat4.scaling(Vec3(1, 0, 1)).inverted()


def test_transpose_involution():
    m = Mat4(range(16))
    assert m.transposed().transposed() == m
    assert m.transposed()[0, 1] == m[1, 0]


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        Mat4([1, 2, 3])


def test_look_at_maps_eye_to_origin():
    eye = Vec3(3, 4, 5)
    view = Mat4.look_at(eye, Vec3.zero(), Vec3.unit_y())
    assert close(view.transform_point(eye), Vec3.zero())
    forward = view.transform_point(Vec3.zero())
    assert forward.z < 0


def test_perspective_maps_near_and_far():
    p = Mat4.perspective(60.0, 1.5, 0.5, 50.0)
    assert p.transform_point(Vec3(0, 0, -0.5)).z == pytest.approx(-1.0)
    assert p.transform_point(Vec3(0, 0, -50.0)).z == pytest.approx(1.0)


def test_orthographic_maps_corners():
    o = Mat4.orthographic(-2, 2, -1, 1, 0.1, 10)
    assert close(o.transform_point(Vec3(2, 1, -0.1)), Vec3(1, 1, -1))
    with pytest.raises(ValueError):
        Mat4.orthographic(1, 1, 0, 1, 0, 1)


def test_vec4_product_matches_point():
    m = Mat4.translation(Vec3(1, 1, 1))
    assert (m @ Vec4(0, 0, 0, 1)).xyz() == m.transform_point(Vec3.zero())