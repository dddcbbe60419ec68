[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfmext"
version = "0.1.0"
description = "Building blocks for GitHub Flavored Markdown extensions: tables, autolinks, strikethrough, task lists and tag filtering"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "gfm", "commonmark", "tables", "autolink", "strikethrough", "tasklist"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gfmext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
