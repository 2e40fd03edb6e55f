[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clawn"
version = "0.1.0"
description = "Scope hierarchies, name mangling, source locations and a high-level intermediate representation for the Clawn language compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "intermediate-representation", "hir", "name-mangling", "language"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clawn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
