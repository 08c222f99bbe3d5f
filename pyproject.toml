[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "singlylist"
version = "0.1.0"
description = "A small singly linked list with indexed insertion, removal and lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "singly linked list", "data structure", "collections"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
singlylist-demo = "singlylist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["singlylist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
