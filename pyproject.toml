[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2022 and 2023, with small grid, string and arithmetic helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "solutions"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-2022-day01 = "aocsolutions.y2022_day01:main"
aoc-2022-day02 = "aocsolutions.y2022_day02:main"
aoc-2022-day03 = "aocsolutions.y2022_day03:main"
aoc-2022-day04 = "aocsolutions.y2022_day04:main"
aoc-2022-day05 = "aocsolutions.y2022_day05:main"
aoc-2022-day06 = "aocsolutions.y2022_day06:main"
aoc-2022-day07 = "aocsolutions.y2022_day07:main"
aoc-2022-day08 = "aocsolutions.y2022_day08:main"
aoc-2022-day09 = "aocsolutions.y2022_day09:main"
aoc-2022-day11 = "aocsolutions.y2022_day11:main"
aoc-2022-day12 = "aocsolutions.y2022_day12:main"
aoc-2022-day14 = "aocsolutions.y2022_day14:main"
aoc-2022-day15 = "aocsolutions.y2022_day15:main"
aoc-2023-day01 = "aocsolutions.y2023_day01:main"
aoc-2023-day02 = "aocsolutions.y2023_day02:main"
aoc-2023-day03 = "aocsolutions.y2023_day03:main"
aoc-2023-day04 = "aocsolutions.y2023_day04:main"
aoc-2023-day05 = "aocsolutions.y2023_day05:main"
aoc-2023-day06 = "aocsolutions.y2023_day06:main"
aoc-2023-day07 = "aocsolutions.y2023_day07:main"
aoc-2023-day08 = "aocsolutions.y2023_day08:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

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
