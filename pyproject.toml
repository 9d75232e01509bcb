[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecosim"
version = "0.1.0"
description = "A small real-time ecosystem simulator with herbivores, carnivores and plants"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["simulation", "ecosystem", "artificial-life", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecosim = "ecosim.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ecosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
