[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcsolve"
version = "0.1.0"
description = "Arc-consistency constraint solver with a cryptarithm (letter addition puzzle) front end"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "constraint satisfaction",
    "arc consistency",
    "AC-3",
    "backtracking",
    "cryptarithm",
    "puzzle",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arcsolve = "arcsolve.cryptarithm:main"

[tool.hatch.build.targets.wheel]
packages = ["arcsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
