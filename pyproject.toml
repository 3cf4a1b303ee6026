[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifeparent"
version = "0.1.0"
description = "Run Conway's Game of Life backwards by searching for parent generations, or forwards in the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game of life",
    "cellular automaton",
    "constraint satisfaction",
    "predecessor",
    "terminal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lifeparent = "lifeparent.cli:main"
lifeparent-sim = "lifeparent.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["lifeparent"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
