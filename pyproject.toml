[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyvol"
version = "0.1.0"
description = "Convex polytopes, random walks and Gaussian-cooling volume estimation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "polytope",
    "volume",
    "random walk",
    "sampling",
    "convex geometry",
    "zonotope",
    "SDPA",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["polyvol"]

[tool.pytest.ini_options]
addopts = "-ra"
