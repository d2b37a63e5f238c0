[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recal"
version = "0.1.0"
description = "Elementary calculus from first principles: series, limits, derivatives, integrals, curves and plots"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["calculus", "numerical", "integration", "differentiation", "plotting", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["recal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
