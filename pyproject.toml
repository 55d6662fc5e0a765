[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskstack"
version = "0.1.0"
description = "A stack-based task scheduler that stores CBOR-serialized tasks and data in one bidirectional buffer"
requires-python = ">=3.10"
dependencies = ["cbor2"]
keywords = ["scheduler", "tasks", "stack", "cbor", "serialization"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taskstack"]

[tool.pytest.ini_options]
addopts = "-ra"
