[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daakit"
version = "0.1.0"
description = "Classic algorithms: sorting, searching, graphs, greedy scheduling, dynamic programming and backtracking"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "binary-search",
    "graphs",
    "dijkstra",
    "kruskal",
    "prim",
    "floyd-warshall",
    "job-sequencing",
    "knapsack",
    "travelling-salesman",
    "subset-sum",
    "n-queens",
    "kmp",
    "rabin-karp",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
daakit = "daakit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["daakit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
