[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilapia"
version = "0.1.0"
description = "A UDP packet daemon and its launcher, process and shared-memory helpers, and a text listing of tiIR binaries"
requires-python = ">=3.10"
dependencies = [
    "filelock",
]
keywords = ["udp", "daemon", "networking", "ir", "bytecode", "shared-memory"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilapia-daemon = "tilapia.daemon:main"
tilapia-cli = "tilapia.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tilapia"]

[tool.hatch.build.targets.sdist]
include = ["tilapia", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
