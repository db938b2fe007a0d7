[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scoreledger"
version = "0.1.0"
description = "Interactive console ledger for player records and game scores stored in CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "records", "scores", "console", "ledger"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scoreledger = "scoreledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scoreledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
