[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arboles"
version = "0.1.0"
description = "Binary trees and binary search trees with interactive console menus"
requires-python = ">=3.10"
keywords = ["binary tree", "binary search tree", "traversal", "data structures", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arbol-binario = "arboles.binary_menu:main"
arbol-abb = "arboles.bst_menu:main"
arbol-signos = "arboles.signs:main"

[tool.hatch.build.targets.wheel]
packages = ["arboles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
