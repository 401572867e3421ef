[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marqueekit"
version = "0.1.0"
description = "Compact and indented JSON writing, plus a small client for a time-zone web service"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "serialization", "pretty-print", "timezone", "clock"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marqueekit"]

[tool.pytest.ini_options]
addopts = "-ra"
