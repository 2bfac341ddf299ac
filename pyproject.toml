[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zxcore"
version = "0.2.0"
description = "Exact phases, cyclotomic scalars, parity expressions and F2 linear algebra for ZX-calculus work"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "zx-calculus", "phase", "scalar", "linear algebra", "gf2"]
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
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zxcore"]

[tool.pytest.ini_options]
addopts = "-ra"
