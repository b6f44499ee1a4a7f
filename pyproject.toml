[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsela"
version = "0.1.0"
description = "Sparse linear algebra building blocks: typed scalars, sparse matrices, storage formats and an algorithm registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse", "linear algebra", "matrix", "csr", "coo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["sparsela"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
