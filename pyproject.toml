[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsadaily"
version = "0.1.0"
description = "Classic data-structure and algorithm solutions as plain Python functions: arrays, hashing, sliding windows, strings, dynamic programming, trees, greedy and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "dynamic-programming", "graphs", "trees", "sliding-window"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsadaily"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
