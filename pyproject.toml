[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycer"
version = "0.1.0"
description = "A top-down racing game with wheel-level vehicle physics, checkpoint zones and text-based maps"
requires-python = ">=3.10"
keywords = ["racing", "game", "physics", "simulation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycer = "raycer.game:main"

[tool.hatch.build.targets.wheel]
packages = ["raycer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
