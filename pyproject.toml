[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "audiocaster"
version = "0.1.0"
description = "2D acoustic ray casting: hear sounds reflect off walls in an interactive scene"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["audio", "ray casting", "acoustics", "simulation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
audiocaster = "audiocaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["audiocaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
