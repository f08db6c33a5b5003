[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Interactive data-structure workbench: queue service simulation, search trees and hash tables, Karger minimum cut"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "queue",
    "simulation",
    "binary search tree",
    "avl tree",
    "hash table",
    "min-cut",
    "karger",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
dslab-queues = "dslab.queues.cli:main"
dslab-trees = "dslab.trees.cli:main"
dslab-mincut = "dslab.mincut.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
