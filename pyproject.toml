[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "fluidsim"
version = "0.1.0"
description = "Particle-based physics simulation: SPH fluid state, soft-body state and geometric integrators"
requires-python = ">=3.10"
dependencies = []
keywords = ["sph", "fluid", "simulation", "particles", "physics", "soft-body", "integrator", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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

[tool.setuptools.packages.find]
include = ["fluidsim*"]

[tool.pytest.ini_options]
addopts = "-ra"
