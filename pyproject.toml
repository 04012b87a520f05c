[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katas"
version = "0.1.0"
description = "Small programming exercises: ciphers, scales, tallies, trees and word games."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "katas", "cipher", "roman-numerals", "scrabble", "tournament"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["katas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
