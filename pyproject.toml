[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prismatic"
version = "0.1.0"
description = "Vector, quaternion, decimal and parametric path primitives for 3D geometry"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "vector", "quaternion", "bezier", "decimal", "cad", "3D"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["prismatic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
