[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "survivor"
version = "0.1.0"
description = "Building blocks for a small top-down survival arcade game: sprite atlases, animations, menu buttons, a player and orbiting bullets."
requires-python = ">=3.10"
dependencies = [
    "pygame>=2.0",
]
keywords = ["game", "arcade", "survival", "pygame", "sprites", "animation"]
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
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["survivor"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
