[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bikerent"
version = "1.0.0"
description = "A small bike rental manager: bikes, riders, rentals and revenue, stored as CSV files."
requires-python = ">=3.10"
dependencies = []
keywords = ["bike", "rental", "csv", "inventory", "cli"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bikerent = "bikerent.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bikerent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
