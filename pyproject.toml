[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeroforce"
version = "0.1.0"
description = "Zero forcing, forts and propagation time of graphs via integer programming"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy>=1.9",
]
keywords = [
    "graph theory",
    "zero forcing",
    "forts",
    "propagation time",
    "throttling",
    "integer programming",
    "graph6",
    "sparse6",
    "nauty",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zeroforce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
