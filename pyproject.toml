[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avlkit"
version = "0.1.0"
description = "A height-balanced AVL tree with traversals, queries, a text renderer and a small report command"
requires-python = ">=3.10"
keywords = ["avl", "tree", "balanced", "binary search tree", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
avlkit-demo = "avlkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["avlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
