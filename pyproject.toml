[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deareader"
version = "0.1.0"
description = "Decode and log real-time samples from a DeA weather station, with weather unit and time helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "weather",
    "weather-station",
    "meteorology",
    "temperature",
    "humidity",
    "pressure",
    "wind",
    "rain",
    "csv",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["deareader"]

[tool.hatch.build.targets.sdist]
include = ["deareader", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
