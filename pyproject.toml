[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raymaze"
version = "0.1.0"
description = "Scene parsing, map validation, XPM textures, player movement and a minimap for a grid-based raycasting maze"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "maze", "xpm", "game", "minimap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raymaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
