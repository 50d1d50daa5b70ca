[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robomaze"
version = "0.1.0"
description = "Find a robot's way out of a rectangular labyrinth with breadth-first and depth-first search"
requires-python = ">=3.10"
dependencies = []
keywords = ["labyrinth", "maze", "bfs", "dfs", "queue", "pathfinding", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robomaze = "robomaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["robomaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
