[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "c3symbols"
version = "0.1.0"
description = "Symbol model and cross-module symbol table for C3 source code tooling"
requires-python = ">=3.10"
dependencies = []
keywords = ["c3", "symbols", "language-server", "indexing", "symbol-table"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["c3symbols"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
