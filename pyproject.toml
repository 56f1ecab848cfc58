[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridworks"
version = "0.1.0"
description = "Sudoku in the terminal and in a pygame window with a backtracking solver, plus a small Strassen matrix toolkit"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["sudoku", "puzzle", "backtracking", "solver", "matrix", "strassen", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridworks-sudoku = "gridworks.console:main"
gridworks-sudoku-gui = "gridworks.gui:main"
gridworks-matrix = "gridworks.matrix:main"

[tool.hatch.build.targets.wheel]
packages = ["gridworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
