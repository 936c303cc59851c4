[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinycas"
version = "0.1.0"
description = "A small interactive calculator with variables, implicit multiplication and elementary functions"
requires-python = ">=3.10"
keywords = ["calculator", "expression", "parser", "math", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinycas = "tinycas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinycas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
