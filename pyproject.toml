[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdpress"
version = "0.1.0"
description = "Helpers for building HTML books from Markdown: snippet line selection, dotted TOML keys, theme loading, code playground wrapping and hidden code lines."
requires-python = ">=3.11"
keywords = ["markdown", "book", "html", "documentation", "code-blocks", "theme"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Documentation",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mdpress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
