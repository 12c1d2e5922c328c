[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classyclash"
version = "0.1.0"
description = "A small top-down action game: roam the map, avoid rocks and logs, and fight off a goblin and a slime."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "rpg", "pygame", "top-down", "sprites"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
classyclash = "classyclash.game:main"

[tool.hatch.build.targets.wheel]
packages = ["classyclash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
