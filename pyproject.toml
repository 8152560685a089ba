[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unipipe"
version = "0.2.11"
description = "A small pipe abstraction that drives both iterators and async iterators."
requires-python = ">=3.10"
keywords = ["pipe", "iterator", "stream", "async", "chunk", "window"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["unipipe"]

[tool.pytest.ini_options]
addopts = "-ra"
