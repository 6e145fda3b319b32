[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isocity"
version = "0.4.0"
description = "Core pieces of an isometric city-building game: map coordinates and geometry, screen/iso conversion, camera, settings files, tile data, compression and terrain biome data."
requires-python = ">=3.10"
dependencies = []
keywords = ["city-builder", "isometric", "game", "simulation", "tiles", "map", "bresenham"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["isocity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
