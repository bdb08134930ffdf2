[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "accesseval"
version = "0.1.0"
description = "Replay page-access traces against eviction strategies and record read/write counts per RAM size"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "eviction", "buffer-pool", "trace", "simulation", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["accesseval"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
