[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "animodeler"
version = "0.1.0"
description = "Vector math, keyframe curve-graph state, particle simulation, .ray scene output and frame image I/O for simple animated models"
requires-python = ">=3.10"
keywords = ["animation", "keyframes", "curves", "particles", "raytracer", "modeling", "vectors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["animodeler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
