[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrikit"
version = "0.1.0"
description = "Tetris board model, SRS rotation system and piece placement search"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "srs", "puzzle", "search", "t-spin", "game"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tetrikit"]

[tool.pytest.ini_options]
addopts = "-ra"
