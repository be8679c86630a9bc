[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslib"
version = "0.1.0"
description = "Memory managers, sequence and hierarchy structures, and helpers to filter and sort territorial units"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "hierarchy", "tree", "memory manager", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dslib"]

[tool.pytest.ini_options]
addopts = "-ra"
