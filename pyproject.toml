[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fvmstate"
version = "0.1.0"
description = "State types, proof tables, big integers and deal structures for the Filecoin virtual machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["filecoin", "cbor", "state", "actors", "storage-deals", "bigint"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fvmstate"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
