[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vibend"
version = "0.25.2"
description = "Small ANSI terminal drawing toolkit: cursor control, colours, panels, progress bars, text boxes and item selectors."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "console", "tui", "widgets", "progress-bar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vibend"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
