[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdplayer"
version = "0.5.0"
description = "A simulated audio CD player: tray, disc, reading cell, sound output and a headless control panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["cd", "audio", "player", "simulation", "state machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: CD Audio :: CD Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cdplayer = "cdplayer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cdplayer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
