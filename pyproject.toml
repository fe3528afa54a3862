[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meatball-chase"
version = "0.1.0"
description = "Top-down maze game: steer a pug around a maze and eat the meatballs that run away from it."
requires-python = ">=3.10"
keywords = ["game", "maze", "arcade", "pygame", "top-down"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meatball-chase = "meatball_chase.game:main"

[tool.hatch.build.targets.wheel]
packages = ["meatball_chase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
