[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmarkhtml"
version = "0.1.0"
description = "Markdown event types, link-label scanning, spec-case reading and parse-time linearity checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "events", "link-labels", "spec", "linearity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmarkhtml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
