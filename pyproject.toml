[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numbercraft"
version = "0.1.0"
description = "Small number, digit, array, character and temperature routines for learning and everyday use"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "number theory",
    "digits",
    "primes",
    "armstrong",
    "palindrome",
    "sorting",
    "searching",
    "temperature",
    "interest",
    "bmi",
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numbercraft = "numbercraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numbercraft"]

[tool.hatch.build.targets.sdist]
include = ["numbercraft", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
