[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portagens"
version = "0.1.0"
description = "Toll-road records (owners, vehicles, sensors, distances and passages) with an interactive console menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["toll", "vehicles", "sensors", "passages", "console", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
portagens = "portagens.main:main"

[tool.hatch.build.targets.wheel]
packages = ["portagens"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
