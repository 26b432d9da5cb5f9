[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtmsgs"
version = "0.1.0"
description = "Compact little-endian wire encoding for robot messages, times and durations"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "serialization", "messages", "serial", "embedded"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtmsgs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
