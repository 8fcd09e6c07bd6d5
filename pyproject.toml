[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termwordle"
version = "0.1.0"
description = "A Wordle game for the terminal with 5, 6 and 7 letter modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "game", "terminal", "puzzle", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
termwordle = "termwordle.main:main"

[tool.hatch.build.targets.wheel]
packages = ["termwordle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
