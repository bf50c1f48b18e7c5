[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dhdresolve"
version = "0.1.0"
description = "Dependency ordering for declarative setup modules, with cycle and missing-dependency detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["dependencies", "topological-sort", "dotfiles", "setup", "modules"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Installation/Setup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dhdresolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
