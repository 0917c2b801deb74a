[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matsgame"
version = "0.1.0"
description = "Movement, health and camera rules for a top-down 2D space shooter"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "velocity", "acceleration", "health", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matsgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
