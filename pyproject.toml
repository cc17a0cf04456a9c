[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solarium"
version = "0.1.0"
description = "Barnes-Hut N-body gravitational simulation of a solar system"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-body", "barnes-hut", "octree", "gravity", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
solarium = "solarium.main:main"

[tool.hatch.build.targets.wheel]
packages = ["solarium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
