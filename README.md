# ygl

A small 3D graphics toolkit in pure Python. It provides:

- **Math** (`ygl.vector`, `ygl.matrix`, `ygl.quat`, `ygl.ray`): immutable `Vec2`,
  `Vec3` and `Vec4`; a row-major `Mat4` with translation, scaling, rotation,
  `look_at`, `perspective` and `orthographic` constructors, `determinant`,
  `inverted`, `transform_point` and `transform_direction`; `Quat` with
  `from_axis_angle`, `rotate`, `to_matrix` and the `slerp` function; `Ray` with a
  `t_min`/`t_max` interval. The helpers `lerp`, `clamp` and `is_zero` live in
  `ygl.vector`.
- **Geometry** (`ygl.bounding_box`): an axis-aligned `BoundingBox` that starts
  empty, grows with `expand`, and offers `contains`, `intersects`,
  `intersect_ray` (slab test returning the entry and exit parameters),
  `distance_to`, `corners`, `transform` and `merge`.
- **Scene graph** (`ygl.object3d`, `ygl.scene`): `Object3D` nodes with position,
  rotation and scale, parent/child links and `local_matrix` / `world_matrix`;
  a `Scene` holding objects, lights and animations, with lookup by name and
  world-space bounds of every object that carries a `bounding_box`.
- **Lights** (`ygl.light`): `DirectionalLight`, `PointLight`, `SpotLight` and
  `AreaLight`, each evaluating `radiance(point, normal)`; point and spot lights
  have constant/linear/quadratic attenuation and an optional range, spot lights
  an inner/outer cone in degrees.
- **Animation** (`ygl.animation`): `Keyframe`, `AnimationCurve` (sorted
  keyframes, looping, speed), `Animation` (one curve per target object, a shared
  clock that writes position, rotation and scale into its targets) and
  `AnimationSystem` to update many animations together.
- **Ray queries** (`ygl.bvh`): `Triangle` with Möller–Trumbore intersection and
  a median-split `BVH` whose `intersect` returns the closest hit as
  `(t, triangle index)` or `None`.
- **Utilities**: `ygl.file_utils` for reading, writing, listing, copying,
  moving and deleting files and for path strings; `ygl.image_utils` for an
  `Image` value type, loading with Pillow (`load_image`, `load_image_float`),
  saving as PNG (`save_image`, `save_image_float`), nearest-neighbour
  `resize_image`, `flip_vertically`, `convert_to_rgba` and `convert_to_rgb`.

## Installation

```
pip install .
```

Pillow is the only runtime dependency. Python 3.10 or later is required.

## Example

```python
from ygl.vector import Vec3
from ygl.ray import Ray
from ygl.bvh import BVH, Triangle
from ygl.light import PointLight

tri = Triangle(Vec3(-1, -1, 0), Vec3(1, -1, 0), Vec3(0, 1, 0))
bvh = BVH()
bvh.build([tri])

ray = Ray(Vec3(0, 0, 5), Vec3(0, 0, -1))
hit = bvh.intersect(ray, 0.0, 100.0)   # (5.0, 0)

lamp = PointLight(Vec3(0, 0, 2), Vec3(1, 1, 1), 1.0)
print(lamp.radiance(Vec3(0, 0, 0), Vec3(0, 0, 1)))
```

Matrices compose with the `@` operator, for example
`Mat4.translation(Vec3(1, 0, 0)) @ Mat4.rotation_y(0.5)`.

## What it does not do

ygl is a library of building blocks. It does not produce rendered images: there
is no rasteriser, path tracer, material or BRDF evaluation, and no GPU or window
support. It has no mesh or model file loaders and no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```