[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snesjam"
version = "0.1.0"
description = "A small top-down delivery game: walk a tiled world, visit cities and pick up packages, driven headless from scripts of pad states."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tilemap", "simulation", "delivery", "retro", "headless"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snesjam = "snesjam.main:main"

[tool.hatch.build.targets.wheel]
packages = ["snesjam"]

[tool.pytest.ini_options]
addopts = "-ra"
