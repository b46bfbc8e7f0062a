"""Historian hysteria: comparing two lists of location ids."""

import argparse
import sys
from collections import Counter


def _read_input(argv):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input", nargs="?", default="-", help="puzzle input file, '-' for stdin"
    )
    args = parser.parse_args(argv)
    if args.input == "-":
        return sys.stdin.read()
    with open(args.input, encoding="utf-8") as handle:
        return handle.read()


def parse_lists(text):
    """Return the left and right columns as two lists of numbers."""
    left, right = [], []
    for line in text.rstrip("\n").split("\n"):
        columns = line.split()
        if len(columns) != 2:
            raise ValueError(f"Invalid row {line!r}")
        left.append(int(columns[0]))
        right.append(int(columns[1]))
    return left, right


def part1(text):
    """Total distance between the sorted lists."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Similarity score: each left number times its count in the right list."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv=None):
    text = _read_input(argv)
    try:
        first = part1(text)
        second = part2(text)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Answer part 1: {first}")
    print(f"Answer part 2: {second}")
    return 0