[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stlscene"
version = "0.1.0"
description = "Binary STL loading, distance-based model streaming and first-person camera control for simple 3D scenes"
requires-python = ">=3.10"
dependencies = []
keywords = ["stl", "3d", "mesh", "scene", "camera", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stlscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
