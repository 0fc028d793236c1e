[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "onpe"
version = "0.1.0"
description = "Console tool for running a small district election: candidate registration, voter roll, polling tables, voting and results."
requires-python = ">=3.10"
dependencies = []
keywords = ["election", "voting", "candidates", "polling", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
onpe = "onpe.cli:main"

[tool.setuptools.packages.find]
include = ["onpe*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
