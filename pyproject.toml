[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferriswheel"
version = "0.1.0"
description = "An animated 3D Ferris wheel scene rendered with OpenGL through pyglet"
requires-python = ">=3.10"
keywords = ["ferris wheel", "opengl", "3d", "animation", "pyglet"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
ferriswheel = "ferriswheel.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ferriswheel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
