[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridquest"
version = "0.1.0"
description = "A small tile-based maze game: walk the player over a text-defined map of walls, monsters and goals."
requires-python = ">=3.10"
keywords = ["game", "maze", "tiles", "pygame", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridquest = "gridquest.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["gridquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
