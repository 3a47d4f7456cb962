[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jokerdeck"
version = "0.1.0"
description = "Scoring model for a poker-style deck-building card game: cards, hands, planets, blinds and jokers."
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "poker", "jokers", "game", "simulation", "scoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jokerdeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
