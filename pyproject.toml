[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dominionsim"
version = "0.1.0"
description = "A rules engine, scripted bots and a command-line table for the Dominion deck-building card game"
requires-python = ">=3.10"
dependencies = []
keywords = ["dominion", "card game", "deck building", "simulation", "board game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
dominion-playdom = "dominionsim.playdom:main"
dominion-player = "dominionsim.player:main"

[tool.setuptools.packages.find]
include = ["dominionsim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
