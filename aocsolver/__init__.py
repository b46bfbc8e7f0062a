"""Solutions to Advent of Code puzzles: 2022 days 1-14, 2023 days 1-8, 2024 days 1-5."""

__version__ = "0.1.0"