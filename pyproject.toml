[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seriesmath"
version = "0.1.0"
description = "Exponential, logarithm, absolute value and remainder computed from series and iteration"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "exp", "log", "fabs", "fmod", "series"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seriesmath"]

[tool.pytest.ini_options]
addopts = "-ra"
