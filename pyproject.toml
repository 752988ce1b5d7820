[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireframe3d"
version = "0.1.0"
description = "A small wireframe 3D renderer with perspective projection, box collisions and a free-flying camera"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["3d", "wireframe", "renderer", "projection", "pygame"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wireframe3d = "wireframe3d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wireframe3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
