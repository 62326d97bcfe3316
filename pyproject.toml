[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randex"
version = "0.0.1"
description = "Small string, search, collection and shared-state utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["anagrams", "parentheses", "two-sum", "deduplication", "grouping", "trees"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["randex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
