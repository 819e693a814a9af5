[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadesixteen"
version = "0.1.0"
description = "Small arcade games on pygame, with their game logic kept apart from drawing"
requires-python = ">=3.10"
keywords = ["arcade", "games", "arkanoid", "asteroids", "pygame"]
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
arcadesixteen = "arcadesixteen.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadesixteen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
