[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicir"
version = "1.0.1"
description = "Linear intermediate representation, symbol tables and helpers for a small C-like language compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ir", "intermediate-representation", "symbol-table", "minic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minicir"]

[tool.pytest.ini_options]
addopts = "-ra"
