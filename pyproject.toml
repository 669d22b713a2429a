[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic teaching algorithms: factorial, Towers of Hanoi and in-place sorting routines"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "recursion", "hanoi", "factorial", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-factorial = "algolab.factorial:main"
algolab-hanoi = "algolab.hanoi:main"
algolab-sort = "algolab.sort_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
