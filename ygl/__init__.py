"""Pure-Python 3D graphics toolkit: math, scene graph, lights, animation, BVH ray queries and file and image utilities."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "bounding_box",
    "bvh",
    "file_utils",
    "image_utils",
    "light",
    "matrix",
    "object3d",
    "quat",
    "ray",
    "scene",
    "vector",
]