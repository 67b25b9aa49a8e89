[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "controlroom"
version = "0.1.0"
description = "Touch-screen control room for a two-player cooperative puzzle game, talking to the game host over TCP"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "cooperative", "keypad", "pygame", "control-room"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
controlroom = "controlroom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["controlroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
