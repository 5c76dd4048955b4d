[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvekit"
version = "0.1.0"
description = "Algorithm and data-structure routines for strings, arrays, graphs, trees and dynamic programming"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "fenwick-tree",
    "rolling-hash",
    "prefix-sums",
    "dynamic-programming",
    "graphs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solvekit"]

[tool.hatch.build.targets.sdist]
include = ["solvekit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
