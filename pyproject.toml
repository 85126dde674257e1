[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jvers"
version = "2.14.1"
description = "Library version string and version comparison helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["version", "compare"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
