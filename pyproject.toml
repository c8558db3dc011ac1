[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crealiz"
version = "0.1.0"
description = "Type-driven binary serialization of primitives, arrays, pointers and structs"
requires-python = ">=3.10"
dependencies = []
keywords = ["serialization", "binary", "struct", "stream", "codec"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crealiz = "crealiz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crealiz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
