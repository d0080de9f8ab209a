[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rastercut"
version = "0.1.0"
description = "Raster filling and clipping algorithms: scan-line and seed fill, rectangle, convex-polygon and polygon clipping"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterization",
    "scanline",
    "flood-fill",
    "seed-fill",
    "clipping",
    "cohen-sutherland",
    "cyrus-beck",
    "sutherland-hodgman",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rastercut"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
