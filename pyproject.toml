[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonwalk"
version = "0.1.0"
description = "A small top-down walking game: move a square around a scattered field, touch a trigger to open a conversation box, pause and resume."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "top-down", "dungeon", "rpg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeonwalk = "dungeonwalk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
