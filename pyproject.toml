[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psrsort"
version = "0.1.0"
description = "Parallel Sorting by Regular Sampling (PSRS) benchmark with a sequential sort baseline"
requires-python = ">=3.10"
keywords = ["sorting", "psrs", "parallel", "benchmark", "regular sampling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
psrs = "psrsort.psrs:main"
psrs-qs = "psrsort.quicksort:main"

[tool.hatch.build.targets.wheel]
packages = ["psrsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
