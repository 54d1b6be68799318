[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessgame"
version = "0.1.0"
description = "Terminal chess game for human and computer players"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
chessgame = "chessgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chessgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
