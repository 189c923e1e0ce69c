[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "koalagraph"
version = "0.1.0"
description = "Graph algorithms: greedy and perfect-graph vertex coloring, exact minimum dominating sets and maximum flow"
requires-python = ">=3.10"
keywords = [
    "graph",
    "coloring",
    "perfect graph",
    "dominating set",
    "maximum flow",
    "push-relabel",
    "link-cut tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
dependencies = [
    "networkx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["koalagraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
