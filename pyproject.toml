[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apeiron"
version = "0.1.0"
description = "Numerical utilities: tolerant comparisons, basic maths, string enclosures, random generators, timers, benchmarks and bound-checked arrays."
requires-python = ">=3.10"
dependencies = []
keywords = ["mathematics", "numerics", "comparison", "tolerance", "benchmark", "arrays", "multi-dimensional arrays"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["apeiron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
