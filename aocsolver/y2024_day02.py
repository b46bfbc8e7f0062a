"""Red-nosed reports: checking levels for safe, steady change."""

import argparse
import sys


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


def parse_reports(text):
    """One list of levels per line."""
    return [
        [int(value) for value in line.split(" ")]
        for line in text.rstrip("\n").split("\n")
    ]


def is_safe(report):
    """True if levels move one way only, by 1 to 3 at each step."""
    if len(report) < 2:
        raise ValueError("A report needs at least two levels")
    decreasing = report[0] > report[1]
    return all(
        (first > second) == decreasing and 1 <= abs(first - second) <= 3
        for first, second in zip(report, report[1:])
    )


def is_safe_with_dampener(report):
    """True if the report is safe, or becomes safe without one of its levels."""
    if is_safe(report):
        return True
    return any(
        is_safe(report[:index] + report[index + 1 :]) for index in range(len(report))
    )


def part1(text):
    """Number of safe reports."""
    return sum(1 for report in parse_reports(text) if is_safe(report))


def part2(text):
    """Number of reports safe when one bad level may be dropped."""
    return sum(1 for report in parse_reports(text) if is_safe_with_dampener(report))


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