[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bistro"
version = "0.1.0"
description = "A small restaurant management HTTP API for menu items, orders, tables and reservations, stored in SQLite."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["restaurant", "rest", "api", "sqlite", "flask", "orders", "reservations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bistro = "bistro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bistro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
