[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slimearena"
version = "0.1.0"
description = "Rendering-independent game logic for a two-slime arena battle: easing curves, fades, input edges, effects, sound, scenes and win rules."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arena", "easing", "fade", "scene", "input", "tween"]
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
packages = ["slimearena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
