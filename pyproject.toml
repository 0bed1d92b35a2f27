[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerbox"
version = "0.1.0"
description = "Small teaching programs: data structures, sorting and shuffling, a lotto simulator, greetings, BMI, tone synthesis and pixel drawing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data-structures",
    "deque",
    "linked-list",
    "queue",
    "stack",
    "hash-map",
    "shuffle",
    "lotto",
    "bmi",
    "synthesis",
    "raster",
    "pixel-art",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerbox-sorting = "tinkerbox.sorting:main"
tinkerbox-greetings = "tinkerbox.greetings:main"
tinkerbox-bmi = "tinkerbox.bmi:main"
tinkerbox-tones = "tinkerbox.tones:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerbox"]

[tool.hatch.build.targets.sdist]
include = ["tinkerbox", "tests", "README.md", "pyproject.toml"]

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
warn_unused_ignores = true
warn_redundant_casts = true
