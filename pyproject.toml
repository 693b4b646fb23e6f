[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loopzone"
version = "0.1.0"
description = "Engine core for a side-scrolling platformer: actors, components, colliders, loop and pipe courses, resources."
requires-python = ">=3.10"
keywords = ["game", "platformer", "collision", "engine", "sprites", "animation"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["loopzone"]

[tool.pytest.ini_options]
addopts = "-ra"
