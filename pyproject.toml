[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sewerfrog"
version = "1.0.0"
description = "A small tile-based puzzle game: guide the frog through the sewer, collect every egg and reach the exit."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "tile", "maze", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sewerfrog = "sewerfrog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sewerfrog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
