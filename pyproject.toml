[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ygl"
version = "0.1.0"
description = "Pure-Python 3D graphics toolkit: vector math, scene graph, lights, animation, BVH ray queries and image utilities"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["3d", "graphics", "bvh", "ray tracing", "scene graph", "animation", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ygl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
