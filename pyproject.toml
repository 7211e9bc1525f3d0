[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orangekit"
version = "0.1.0"
description = "Engine utilities for voxel games: simplex noise, vector math, ray casting, clocks, input state, debug geometry, logging and leak tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "simplex noise", "game engine", "raycast", "debug rendering", "input"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orangekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
