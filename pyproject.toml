[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "backrooms"
version = "0.1.0"
description = "A small procedural room engine: camera, meshes, materials, scene objects and an OpenGL viewport"
requires-python = ">=3.10"
keywords = ["opengl", "3d", "rendering", "procedural", "scene", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
backrooms = "backrooms.app:main"

[tool.hatch.build.targets.wheel]
packages = ["backrooms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
