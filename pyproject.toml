[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsemat"
version = "0.1.0"
description = "Pure-Python compressed sparse matrices and vectors with triplet assembly, permutations, products and Cuthill-McKee orderings"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse", "matrix", "csr", "csc", "triplet", "permutation", "cuthill-mckee", "laplacian"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["sparsemat"]

[tool.pytest.ini_options]
addopts = "-ra"
