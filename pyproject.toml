[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modaledit"
version = "0.1.0"
description = "A small modal terminal text editor with undo and redo"
requires-python = ">=3.10"
keywords = ["editor", "text-editor", "modal", "curses", "terminal", "undo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modaledit = "modaledit.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["modaledit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
