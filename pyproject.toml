[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algosuite"
version = "0.1.0"
description = "Classic algorithms: graph traversal, shortest paths, spanning trees, strong components, topological order, N-queens, primes and sequence utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "bfs",
    "dfs",
    "dijkstra",
    "floyd-warshall",
    "prim",
    "kruskal",
    "kosaraju",
    "topological-sort",
    "articulation-points",
    "hamiltonian-path",
    "n-queens",
    "sieve",
    "josephus",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algosuite"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
