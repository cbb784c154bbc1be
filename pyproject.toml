[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballpit"
version = "0.1.0"
description = "An interactive ball pit: drop bouncing balls and watch them collide."
requires-python = ">=3.10"
keywords = ["physics", "simulation", "collision", "pygame", "game"]
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
ballpit = "ballpit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ballpit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
