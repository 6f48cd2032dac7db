[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxikv"
version = "0.1.0"
description = "A small in-memory key-value server speaking a subset of RESP, with an append-only log"
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "resp", "server", "append-only-file", "asyncio"]
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
    "Framework :: AsyncIO",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
oxikv-server = "oxikv.server:main"
oxikv-cli = "oxikv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oxikv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
