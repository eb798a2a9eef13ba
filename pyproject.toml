[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arsenalshop"
version = "0.1.0"
description = "A small in-game weapon shop: name-ordered catalogue trees, user accounts, shopping carts and plain-text storage."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shop", "weapons", "inventory", "binary-search-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arsenalshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
