[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noname"
version = "0.1.0"
description = "Lexer, manifests, dependency resolution and package scaffolding for a small circuit language"
requires-python = ">=3.11"
keywords = ["compiler", "lexer", "zero-knowledge", "circuits", "package-manager"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
noname = "noname.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["noname"]

[tool.pytest.ini_options]
addopts = "-ra"
