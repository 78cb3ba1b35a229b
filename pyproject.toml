[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprtree"
version = "0.1.0"
description = "Build arithmetic expression trees from prefix text, evaluate them and write them as Graphviz DOT"
requires-python = ">=3.10"
dependencies = []
keywords = ["expression", "tree", "arithmetic", "graphviz", "dot", "evaluator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exprtree = "exprtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exprtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
