[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obslogger"
version = "0.1.0"
description = "A small observer-based logger that fans messages out to stdout, files and an in-memory buffer."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "observer", "stdout", "file", "memory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
obslogger-demo = "obslogger.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["obslogger"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
