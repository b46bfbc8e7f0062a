"""Calorie counting: totals of the food carried by each elf."""

import argparse
import sys


def _read_input(argv, description=None):
    """Read the puzzle input named on the command line, or stdin for '-'."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "input", nargs="?", default="-", help="puzzle input file, '-' for stdin"
    )
    args = parser.parse_args(argv)
    if args.input == "-":
        return sys.stdin.read()
    with open(args.input, encoding="utf-8") as handle:
        return handle.read()


def _print_answers(text, solvers, error_format="{exc}"):
    """Print each labelled answer in turn; stop at the first ValueError."""
    for label, solver in solvers:
        try:
            answer = solver(text)
        except ValueError as exc:
            print(error_format.format(label=label, exc=exc))
            return 1
        print(f"{label}: {answer}")
    return 0


def elf_totals(text):
    """Return the calorie total of every elf, largest first."""
    totals = []
    for group in text.rstrip("\n").split("\n\n"):
        try:
            totals.append(sum(int(line) for line in group.split("\n")))
        except ValueError as exc:
            raise ValueError(f"Unable to convert string to int, {exc}") from exc
    totals.sort(reverse=True)
    return totals


def part1(text):
    """Calories carried by the elf carrying the most."""
    return elf_totals(text)[0]


def part2(text):
    """Calories carried by the (up to) three elves carrying the most."""
    return sum(elf_totals(text)[:3])


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__),
        (("Part 1", part1), ("Part 2", part2)),
        "{label}: Error, {exc}",
    )