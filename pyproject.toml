[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heapkit"
version = "0.1.0"
description = "Array-backed binary max-heap primitives and heap-based selection, merging and streaming-median algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "heap",
    "priority queue",
    "heap sort",
    "k-way merge",
    "running median",
    "sliding window",
    "algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
heapkit-median = "heapkit.median:main"

[tool.hatch.build.targets.wheel]
packages = ["heapkit"]

[tool.hatch.build.targets.sdist]
include = [
    "heapkit",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
