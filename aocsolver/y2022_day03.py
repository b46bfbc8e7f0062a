"""Rucksack reorganisation: priorities of shared items."""

import string

from aocsolver.y2022_day01 import _print_answers, _read_input

_PRIORITIES = {
    letter: number
    for number, letter in enumerate(string.ascii_lowercase + string.ascii_uppercase, 1)
}


def priority(item):
    """Priority of an item: a-z are 1-26, A-Z are 27-52, anything else 0."""
    return _PRIORITIES.get(item, 0)


def _lines(text):
    return text.rstrip("\n").split("\n")


def part1(text):
    """Sum of priorities of items found in both compartments of each rucksack."""
    total = 0
    for line in _lines(text):
        if len(line) == 1:
            continue
        half = len(line) // 2
        total += sum(priority(item) for item in set(line[:half]) & set(line[half:]))
    return total


def part2(text):
    """Sum of priorities of the badge shared by each group of three elves."""
    lines = _lines(text)
    total = 0
    for first, second, third in zip(*[iter(lines)] * 3):
        total += sum(priority(item) for item in set(first) & set(second) & set(third))
    return total


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__), (("Part 1", part1), ("Part 2", part2))
    )