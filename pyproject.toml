[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarian"
version = "0.1.0"
description = "A small interactive library management tool: books, loans and members kept in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalog", "loans", "members"]
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
librarian = "librarian.shell:main"
librarian-classic = "librarian.classic:main"

[tool.hatch.build.targets.wheel]
packages = ["librarian"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
