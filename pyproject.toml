[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sohop"
version = "0.1.0"
description = "A tiny entity-component platformer: a hopping sprite with gravity, jumping and box collision."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "ecs", "pygame", "gravity", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sohop = "sohop.main:main"

[tool.hatch.build.targets.wheel]
packages = ["sohop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
