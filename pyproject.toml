[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consnake"
version = "0.1.0"
description = "A classic snake game for the terminal, with obstacles and a high-score table"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "console", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consnake = "consnake.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["consnake"]

[tool.pytest.ini_options]
addopts = "-ra"
