[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "farfarwest"
version = "0.1.0"
description = "Procedural terrain, towns, railway network, names and turn scheduling for a Far West roguelike"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "roguelike",
    "procedural-generation",
    "western",
    "world-generation",
    "name-generator",
    "railway",
    "perlin-noise",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[project.scripts]
farfarwest-names = "farfarwest.names:main"

[tool.hatch.build.targets.wheel]
packages = ["farfarwest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
