[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perceptra"
version = "0.1.0"
description = "Feed-forward neural layers with back-propagation, error functions, a threshold wrapper, an LRU cache and a listener registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "perceptron", "backpropagation", "machine learning", "lru cache", "observer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["perceptra"]

[tool.pytest.ini_options]
addopts = "-ra"
