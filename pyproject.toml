[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "allumettes"
version = "0.1.0"
description = "The matchstick game of Nim in the terminal: play against an easy or hard computer or a friend, or watch two computers play each other."
requires-python = ">=3.10"
dependencies = []
keywords = ["nim", "matches", "allumettes", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
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
allumettes = "allumettes.game:main"
allumettes-duel = "allumettes.duel:main"
allumettes-classic = "allumettes.classic:main"

[tool.hatch.build.targets.wheel]
packages = ["allumettes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
