[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weaves"
version = "0.1.0"
description = "Partially ordered sets with pluggable sort strategies, and discovery and picking of per-project hack scripts."
requires-python = ">=3.10"
dependencies = []
keywords = ["poset", "partial order", "mergesort", "scripts", "hack", "weave"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["weaves"]

[tool.pytest.ini_options]
addopts = "-ra"
