[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ccom"
version = "0.1.0"
description = "A small compiler back half for integer expressions: parse a token stream and emit x86-64 assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "assembly", "x86-64", "expressions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ccom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
