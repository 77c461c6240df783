[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satsolve"
version = "0.1.0"
description = "Small SAT solvers for DIMACS CNF formulas: DPLL, greedy local search and WalkSAT"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "cnf", "dimacs", "dpll", "walksat", "local-search", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
satsolve = "satsolve.cli:main"
satsolve-dpll = "satsolve.cli:dpll_main"
satsolve-gensat = "satsolve.cli:gensat_main"
satsolve-walksat = "satsolve.cli:walksat_main"

[tool.hatch.build.targets.wheel]
packages = ["satsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
