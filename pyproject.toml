[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sr2kit"
version = "0.0.1"
description = "Small toolkit for byte buffers, file helpers, a sample SQLite database and chunked HTTP downloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["buffer", "chunk", "files", "sqlite", "download", "cli"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
sr2 = "sr2kit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sr2kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
