[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartcommunity"
version = "0.1.0"
description = "Residential community records on SQLite: staff accounts, owners, parking spots, property documents and payments."
requires-python = ">=3.10"
dependencies = []
keywords = ["community", "property management", "parking", "sqlite", "residents"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smartcommunity = "smartcommunity.app:main"

[tool.hatch.build.targets.wheel]
packages = ["smartcommunity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
