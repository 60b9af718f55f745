[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libreria"
version = "0.1.0"
description = "Bookshop management: strings, dates, articles, payment cards and users with shopping carts"
requires-python = ">=3.10"
dependencies = [
    "passlib",
]
keywords = ["bookshop", "shopping cart", "luhn", "dates", "payment cards"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["libreria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
