[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubmap"
version = "0.1.0"
description = "Reader for .cub scene files describing wall textures, floor and ceiling colours and a tile map"
requires-python = ">=3.10"
dependencies = []
keywords = ["cub", "map", "parser", "raycaster", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubmap = "cubmap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
