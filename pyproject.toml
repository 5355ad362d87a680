[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexwarz"
version = "0.1.0"
description = "Hex Warz, a two-player hexagon card board game, plus a small arcade shooter"
requires-python = ">=3.10"
keywords = ["game", "board game", "hexagon", "cards", "pygame", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexwarz = "hexwarz.app:main"
hexwarz-shooter = "hexwarz.shooter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hexwarz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
