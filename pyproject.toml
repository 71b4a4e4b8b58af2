[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: backtracking, arrays, stacks, linked lists, matrices and strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "n-queens", "sudoku", "lru-cache", "backtracking", "stack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-nqueens = "dsakit.nqueens:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
