[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poisson3d"
version = "0.1.0"
description = "Jacobi sweeps for the Poisson problem on a 3D cube, with Frobenius norms and VTK/binary output"
requires-python = ">=3.10"
keywords = ["poisson", "jacobi", "finite-difference", "heat", "vtk", "numerical"]
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
poisson3d = "poisson3d.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["poisson3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
