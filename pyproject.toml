[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linq"
version = "3.0.0"
description = "Lazy, chainable query operations over Python iterables"
requires-python = ">=3.10"
dependencies = []
keywords = ["linq", "query", "iterator", "lazy", "collections", "join", "group-by"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["linq"]

[tool.pytest.ini_options]
addopts = "-ra"
