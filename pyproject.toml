[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cliquedensity"
version = "0.1.0"
description = "Clique-density densest subgraph search using minimum cuts and core decomposition"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "clique",
    "densest subgraph",
    "max flow",
    "min cut",
    "core decomposition",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
cliquedensity-exact = "cliquedensity.exact:main"
cliquedensity-core = "cliquedensity.core:main"

[tool.hatch.build.targets.wheel]
packages = ["cliquedensity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
