"""Print queue: checking and fixing page orders against rules."""

import argparse
import sys
from functools import cmp_to_key


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


def parse(text):
    """Return the set of (before, after) rules and the list of page updates."""
    sections = text.rstrip("\n").split("\n\n")
    if len(sections) < 2:
        raise ValueError("Missing updates section")
    rules = set()
    for line in sections[0].split("\n"):
        parts = line.split("|")
        if len(parts) != 2:
            raise ValueError(f"Invalid rule {line!r}")
        rules.add((int(parts[0]), int(parts[1])))
    updates = [
        [int(page) for page in line.split(",")] for line in sections[1].split("\n")
    ]
    return rules, updates


def middle_page(pages, rules):
    """Middle page of the update once ordered, and whether it already was."""
    if not pages:
        raise ValueError("Empty update")

    def order(a, b):
        if (a, b) in rules:
            return -1
        if (b, a) in rules:
            return 1
        return 0

    already_sorted = all(
        order(later, earlier) >= 0 for earlier, later in zip(pages, pages[1:])
    )
    ordered = pages if already_sorted else sorted(pages, key=cmp_to_key(order))
    return ordered[len(ordered) // 2], already_sorted


def solve(text, already_sorted):
    """Sum of middle pages of updates whose sortedness matches ``already_sorted``."""
    rules, updates = parse(text)
    total = 0
    for pages in updates:
        value, was_sorted = middle_page(pages, rules)
        if was_sorted == already_sorted:
            total += value
    return total


def part1(text):
    """Sum of middle pages of correctly ordered updates."""
    return solve(text, True)


def part2(text):
    """Sum of middle pages of the wrongly ordered updates after fixing them."""
    return solve(text, False)


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