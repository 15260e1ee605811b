[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gphydro"
version = "0.1.0"
description = "One-dimensional finite-volume Euler solver with WENO, Gaussian-process and MOOD reconstructions"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "hydrodynamics",
    "finite volume",
    "euler equations",
    "gaussian process",
    "weno",
    "mood",
    "hll",
    "shu-osher",
    "sod shock tube",
]
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
gphydro = "gphydro.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["gphydro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
