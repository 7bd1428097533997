[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shrline"
version = "0.1.0"
description = "Building blocks for a shell input line: cursor buffer, vi motions, undo history, completion values, menus, highlighting and shell plugin state"
requires-python = ">=3.11"
keywords = ["shell", "readline", "line-editor", "vi", "completion", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Terminals",
    "Typing :: Typed",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["shrline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
