[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glitchbomb"
version = "0.1.0"
description = "Glitch Bomb: a small push-your-luck orb-pulling game"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "pygame", "push-your-luck", "orbs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
glitchbomb = "glitchbomb.app:main"

[tool.hatch.build.targets.wheel]
packages = ["glitchbomb"]

[tool.pytest.ini_options]
addopts = "-ra"
