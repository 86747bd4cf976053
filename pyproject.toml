[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zenengine"
version = "0.1.0"
description = "3D math and scene setup: vectors, quaternions, 4x4 transforms, a free-look camera, a transform pipeline and a BMP reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "matrix", "vector", "quaternion", "camera", "projection", "bmp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zenengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
