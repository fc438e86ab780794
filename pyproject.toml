[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recipeserver"
version = "0.1.1"
description = "A small web server that serves recipes from an SQLite database"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["recipes", "web", "sqlite", "flask", "json-api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
recipeserver = "recipeserver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["recipeserver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
