[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logickit"
version = "0.1.0"
description = "Boolean logic toolkit: operations, vectors, bitwise integers, gates, circuits, truth tables and expression evaluation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "boolean",
    "logic",
    "truth-table",
    "logic-gates",
    "circuit",
    "bitwise",
    "expression-parser",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logickit-examples = "logickit.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["logickit"]

[tool.hatch.build.targets.sdist]
include = ["logickit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
