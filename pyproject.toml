[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokeset"
version = "0.1.0"
description = "Read, search, combine and write Pokédex CSV files with set operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["pokemon", "pokedex", "csv", "set-operations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokeset = "pokeset.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pokeset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
