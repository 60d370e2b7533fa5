[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rescueboat"
version = "0.1.0"
description = "Game logic for a boat-rescue arcade game: transforms, oriented-box collisions, swimmers, input state and a follow camera"
requires-python = ">=3.10"
keywords = ["game", "arcade", "collision", "quaternion", "camera", "simulation"]
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rescueboat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
