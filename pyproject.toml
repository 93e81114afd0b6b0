[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobox"
version = "0.1.0"
description = "Classic algorithms, data structures and small console programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graphs",
    "shortest-path",
    "spanning-tree",
    "sorting",
    "searching",
    "puzzles",
    "sudoku",
    "n-queens",
    "maze",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobox-dll = "algobox.linked_lists:main"
algobox-numbers = "algobox.number_theory:main"
algobox-tictactoe = "algobox.tictactoe:main"
algobox-guess = "algobox.guessing:main"
algobox-rps = "algobox.rps:main"
algobox-records = "algobox.records:main"
algobox-todo = "algobox.todo:main"
algobox-report = "algobox.report:main"
algobox-sample-file = "algobox.sample_file:main"

[tool.hatch.build.targets.wheel]
packages = ["algobox"]

[tool.hatch.build.targets.sdist]
include = ["algobox", "tests"]

[tool.pytest.ini_options]
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
