[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textreloaded"
version = "0.1.0"
description = "Line-by-line text fixer: number conversion, case tags, punctuation, quotes and articles"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "filter", "formatting", "punctuation", "articles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textreloaded = "textreloaded.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["textreloaded"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
