[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicalgos"
version = "0.1.0"
description = "Classic algorithms: binary search, merge sort, quick sort, fractional knapsack, Kruskal's MST and optimal merge pattern."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary-search",
    "merge-sort",
    "quick-sort",
    "knapsack",
    "kruskal",
    "minimum-spanning-tree",
    "union-find",
    "greedy",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
classicalgos-binary-search = "classicalgos.binary_search:main"
classicalgos-knapsack = "classicalgos.knapsack:main"
classicalgos-merge-sort = "classicalgos.merge_sort:main"
classicalgos-kruskal = "classicalgos.kruskal:main"
classicalgos-optimal-merge = "classicalgos.optimal_merge:main"
classicalgos-quick-sort = "classicalgos.quick_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["classicalgos"]

[tool.hatch.build.targets.sdist]
include = ["classicalgos", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
