[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sollong"
version = "1.0.0"
description = "A small tile-based puzzle game: collect every coin, then reach the exit"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile map", "pygame", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
sollong = "sollong.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sollong"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
