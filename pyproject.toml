[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basicalgos"
version = "0.1.0"
description = "Small, classic algorithms on numbers, lists and matrices: searching, sorting, subarrays, series and text patterns."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "matrix", "patterns", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["basicalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
