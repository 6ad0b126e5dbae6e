[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pifecards"
version = "0.1.0"
description = "A two-player terminal card game of sets and runs, with a persistent scoreboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "card-game", "rummy", "terminal", "game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pifecards = "pifecards.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pifecards"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
