[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onemax"
version = "0.1.0"
description = "Exhaustive search, hill climbing, simulated annealing, tabu search and a genetic algorithm on the OneMax problem"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "onemax",
    "metaheuristics",
    "optimization",
    "genetic-algorithm",
    "simulated-annealing",
    "tabu-search",
    "hill-climbing",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
onemax = "onemax.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["onemax"]

[tool.pytest.ini_options]
addopts = "-ra"
