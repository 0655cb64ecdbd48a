[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgesolvers"
version = "0.1.0"
description = "Solvers for classic online-judge programming problems, usable as functions or from the command line."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "online-judge",
    "dynamic-programming",
    "graphs",
    "primes",
    "sokoban",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgesolvers-arithmetic = "judgesolvers.arithmetic:main"
judgesolvers-primes = "judgesolvers.primes:main"
judgesolvers-dynamic = "judgesolvers.dynamic:main"
judgesolvers-text = "judgesolvers.text_puzzles:main"
judgesolvers-graphs = "judgesolvers.graphs:main"
judgesolvers-routing = "judgesolvers.routing:main"
judgesolvers-geometry = "judgesolvers.geometry:main"
judgesolvers-risk = "judgesolvers.risk:main"
judgesolvers-simulation = "judgesolvers.simulation:main"
judgesolvers-products = "judgesolvers.products:main"
judgesolvers-sokoban = "judgesolvers.sokoban:main"

[tool.hatch.build.targets.wheel]
packages = ["judgesolvers"]

[tool.hatch.build.targets.sdist]
include = ["judgesolvers", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
