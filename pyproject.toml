[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmeinverse"
version = "0.2.2"
description = "Numerical inverse Laplace transform with concentrated matrix-exponential (CME) functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["laplace", "inverse-laplace", "numerical-inversion", "matrix-exponential", "cme"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cmeinverse-coefficients = "cmeinverse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cmeinverse"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
