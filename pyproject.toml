[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alienbase"
version = "0.1.0"
description = "Core building blocks for an artificial-life simulation engine: vectors, trackers, services, number generation and a threaded simulation worker."
requires-python = ">=3.10"
dependencies = []
keywords = ["artificial-life", "simulation", "vectors", "engine", "worker"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alienbase"]

[tool.pytest.ini_options]
addopts = "-ra"
