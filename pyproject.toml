[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bermap"
version = "0.1.0"
description = "Load and check .ber tile maps for small grid-based puzzle games"
requires-python = ">=3.10"
dependencies = []
keywords = ["ber", "map", "tilemap", "flood-fill", "validation", "puzzle", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bermap = "bermap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bermap"]

[tool.pytest.ini_options]
addopts = "-ra"
