[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wgraph"
version = "0.1.0"
description = "Weighted undirected graphs with Dijkstra shortest paths and Prim minimum spanning trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "prim", "shortest-path", "minimum-spanning-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
wgraph-demo = "wgraph.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
