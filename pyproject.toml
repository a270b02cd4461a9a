[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numcraft"
version = "0.1.0"
description = "Small number-theory and arithmetic helpers: primes, digit properties, divisors, comparisons, calendar days, dice and text layouts."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "number theory",
    "primes",
    "smith numbers",
    "harshad",
    "armstrong",
    "factorion",
    "amicable numbers",
    "perfect numbers",
    "collatz",
    "taxicab numbers",
    "craps",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
test = ["pytest"]

[project.scripts]
numcraft = "numcraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numcraft"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
