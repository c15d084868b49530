[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "revengine"
version = "0.1.0"
description = "A small component-based 3D game engine with scenes, transforms, input bindings and sprite quads"
requires-python = ">=3.10"
keywords = ["game engine", "game objects", "components", "scenes", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "numpy",
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
revengine-demo = "revengine.game:main"

[tool.hatch.build.targets.wheel]
packages = ["revengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
