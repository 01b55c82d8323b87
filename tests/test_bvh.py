import math
import random

import pytest

from ygl.bounding_box import BoundingBox
from ygl.bvh import BVH, BVHNode, Triangle
from ygl.ray import Ray
from ygl.vector import Vec3


def _close(a, b, tol=1e-7):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def _unit_triangle():
    return Triangle(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))


def _grid(n=6, depths=(0.0, -1.0, -2.5)):
    tris = []
    for z in depths:
        for i in range(n):
            for j in range(n):
                a = Vec3(float(i), float(j), z)
                b = Vec3(i + 1.0, float(j), z)
                c = Vec3(float(i), j + 1.0, z)
                d = Vec3(i + 1.0, j + 1.0, z)
                tris.append(Triangle(a, b, c))
                tris.append(Triangle(b, d, c))
    return tris


def _brute_force(tris, ray):
    best = None
    for index, tri in enumerate(tris):
        hit = tri.intersect(ray)
        if hit is not None and (best is None or hit[0] < best[0]):
            best = (hit[0], index)
    return best


def test_triangle_centroid_is_vertex_mean():
    tri = Triangle(Vec3(1.0, 2.0, 3.0), Vec3(4.0, -2.0, 0.0), Vec3(-2.0, 3.0, 6.0))
    assert list(tri.centroid()) == pytest.approx([1.0, 1.0, 3.0], abs=1e-7)


def test_triangle_bounding_box_contains_vertices():
    tri = Triangle(Vec3(1.0, 2.0, 3.0), Vec3(4.0, -2.0, 0.0), Vec3(-2.0, 3.0, 6.0))
    box = tri.bounding_box()
    for v in (tri.v0, tri.v1, tri.v2):
        assert box.contains(v)
    assert box.min == Vec3.minimum(Vec3.minimum(tri.v0, tri.v1), tri.v2)


def test_triangle_normal_is_unit_and_perpendicular():
    tri = Triangle(Vec3(1.0, 2.0, 3.0), Vec3(4.0, -2.0, 0.0), Vec3(-2.0, 3.0, 6.0))
    n = tri.normal()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n.dot(tri.v1 - tri.v0), 0.0, abs_tol=1e-9)
    assert math.isclose(n.dot(tri.v2 - tri.v0), 0.0, abs_tol=1e-9)


def test_triangle_hit_point_matches_barycentric():
    tri = _unit_triangle()
    ray = Ray(Vec3(0.25, 0.25, 5.0), Vec3(0.0, 0.0, -1.0))
    hit = tri.intersect(ray)
    assert hit is not None
    t, bary = hit
    point = ray.at(t)
    assert math.isclose(point.z, 0.0, abs_tol=1e-9)
    rebuilt = tri.v0 + (tri.v1 - tri.v0) * bary.u + (tri.v2 - tri.v0) * bary.v
    assert _close(rebuilt, point)


@pytest.mark.parametrize("origin, direction", [
    (Vec3(2.0, 2.0, 5.0), Vec3(0.0, 0.0, -1.0)),
    (Vec3(0.25, 0.25, 5.0), Vec3(0.0, 0.0, 1.0)),
    (Vec3(0.25, 0.25, 5.0), Vec3(1.0, 0.0, 0.0)),
])
def test_triangle_misses(origin, direction):
    assert _unit_triangle().intersect(Ray(origin, direction)) is None


def test_triangle_respects_t_max():
    ray = Ray(Vec3(0.25, 0.25, 5.0), Vec3(0.0, 0.0, -1.0))
    tri = _unit_triangle()
    assert tri.intersect(ray, 0.0, 1.0) is None
    assert tri.intersect(ray, 0.0, 10.0) is not None


def test_node_leaf_flag():
    assert BVHNode(count=2).is_leaf()
    assert not BVHNode(left=1, right=2).is_leaf()


def test_empty_build_leaves_bvh_empty():
    bvh = BVH()
    bvh.build([])
    assert bvh.node_count == 0
    assert bvh.intersect(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0))) is None
    with pytest.raises(ValueError):
        bvh.root


def test_build_structure_invariants():
    tris = _grid()
    bvh = BVH()
    bvh.build(tris)
    assert bvh.triangle_count == len(tris)
    leaves = [n for n in bvh.nodes if n.is_leaf()]
    assert sum(n.count for n in leaves) == len(tris)
    assert all(n.count <= 2 for n in leaves)
    covered = sorted(k for n in leaves for k in bvh._order[n.first:n.first + n.count])
    assert covered == list(range(len(tris)))
    for node in bvh.nodes:
        if not node.is_leaf():
            assert node.bounds.contains(bvh.nodes[node.left].bounds)
            assert node.bounds.contains(bvh.nodes[node.right].bounds)
    for tri in tris:
        assert bvh.root.bounds.contains(tri.bounding_box())
    assert bvh.build_time >= 0.0


def test_single_triangle_is_root_leaf():
    bvh = BVH()
    bvh.build([_unit_triangle()])
    assert bvh.node_count == 1
    assert bvh.root.is_leaf()


def test_intersect_matches_brute_force():
    tris = _grid()
    bvh = BVH()
    bvh.build(tris)
    rng = random.Random(7)
    for _ in range(200):
        origin = Vec3(rng.uniform(-1.0, 7.0), rng.uniform(-1.0, 7.0), 5.0)
        target = Vec3(rng.uniform(0.0, 6.0), rng.uniform(0.0, 6.0), -3.0)
        ray = Ray(origin, (target - origin).normalized())
        expected = _brute_force(tris, ray)
        got = bvh.intersect(ray)
        if expected is None:
            assert got is None
        else:
            assert got is not None
            assert math.isclose(got[0], expected[0], abs_tol=1e-9)


def test_intersect_returns_closest_layer():
    tris = _grid()
    bvh = BVH()
    bvh.build(tris)
    ray = Ray(Vec3(2.3, 3.6, 5.0), Vec3(0.0, 0.0, -1.0))
    t, index = bvh.intersect(ray)
    assert math.isclose(ray.at(t).z, 0.0, abs_tol=1e-9)
    assert tris[index].intersect(ray) is not None
    assert all(v.z == 0.0 for v in (tris[index].v0, tris[index].v1, tris[index].v2))


def test_intersect_bounds_skip_near_layer():
    tris = _grid()
    bvh = BVH()
    bvh.build(tris)
    ray = Ray(Vec3(2.3, 3.6, 5.0), Vec3(0.0, 0.0, -1.0))
    near_t, _ = bvh.intersect(ray)
    t, index = bvh.intersect(ray, near_t + 0.5, math.inf)
    assert t > near_t
    assert math.isclose(ray.at(t).z, tris[index].v0.z, abs_tol=1e-9)


def test_clear_resets():
    bvh = BVH()
    bvh.build(_grid(2))
    bvh.clear()
    assert bvh.node_count == 0
    assert bvh.triangle_count == 0


def test_calculate_sah():
    bvh = BVH()
    box = BoundingBox(Vec3.zero(), Vec3.one())
    assert bvh.calculate_sah(box, 3) == 36.0
    assert bvh.calculate_sah(BoundingBox(), 5) == 0.0