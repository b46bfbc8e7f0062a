[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolver"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2022, 2023 and 2024"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
aoc-2022-01 = "aocsolver.y2022_day01:main"
aoc-2022-02 = "aocsolver.y2022_day02:main"
aoc-2022-03 = "aocsolver.y2022_day03:main"
aoc-2022-04 = "aocsolver.y2022_day04:main"
aoc-2022-05 = "aocsolver.y2022_day05:main"
aoc-2022-06 = "aocsolver.y2022_day06:main"
aoc-2022-07 = "aocsolver.y2022_day07:main"
aoc-2022-08 = "aocsolver.y2022_day08:main"
aoc-2022-09 = "aocsolver.y2022_day09:main"
aoc-2022-10 = "aocsolver.y2022_day10:main"
aoc-2022-11 = "aocsolver.y2022_day11:main"
aoc-2022-12 = "aocsolver.y2022_day12:main"
aoc-2022-13 = "aocsolver.y2022_day13:main"
aoc-2022-14 = "aocsolver.y2022_day14:main"
aoc-2023-01 = "aocsolver.y2023_day01:main"
aoc-2023-02 = "aocsolver.y2023_day02:main"
aoc-2023-03 = "aocsolver.y2023_day03:main"
aoc-2023-04 = "aocsolver.y2023_day04:main"
aoc-2023-05 = "aocsolver.y2023_day05:main"
aoc-2023-06 = "aocsolver.y2023_day06:main"
aoc-2023-07 = "aocsolver.y2023_day07:main"
aoc-2023-08 = "aocsolver.y2023_day08:main"
aoc-2024-01 = "aocsolver.y2024_day01:main"
aoc-2024-02 = "aocsolver.y2024_day02:main"
aoc-2024-03 = "aocsolver.y2024_day03:main"
aoc-2024-04 = "aocsolver.y2024_day04:main"
aoc-2024-05 = "aocsolver.y2024_day05:main"

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
