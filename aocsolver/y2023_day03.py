"""Gear ratios: numbers next to symbols in an engine schematic."""

import argparse
import math
import sys
from dataclasses import dataclass
from itertools import groupby

SYMBOL = "symbol"
EMPTY = "empty"
DIGIT = "digit"

_AROUND = ((-1, 0), (1, 0), (0, 1), (0, -1), (1, 1), (-1, 1), (1, -1), (-1, -1))


@dataclass(frozen=True)
class Cell:
    """A run of the schematic: a whole number, a symbol or an empty square."""

    kind: str
    value: str
    width: int = 1


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


def _kind(char):
    if char == ".":
        return EMPTY
    if char.isdecimal():
        return DIGIT
    return SYMBOL


def parse_schematic(text):
    """Map (x, y) to cells; a number is stored once at its first digit."""
    schematic = {}
    for y, row in enumerate(text.rstrip("\n").split("\n")):
        for kind, group in groupby(enumerate(row), key=lambda item: _kind(item[1])):
            group = list(group)
            if kind == DIGIT:
                value = "".join(char for _, char in group)
                schematic[(group[0][0], y)] = Cell(kind, value, len(value))
            else:
                for x, char in group:
                    schematic[(x, y)] = Cell(kind, char)
    return schematic


def is_part_number(schematic, position, width):
    """True if any square of the number at ``position`` touches a symbol."""
    x, y = position
    for offset in range(width):
        for dx, dy in _AROUND:
            cell = schematic.get((x + offset + dx, y + dy))
            if cell is not None and cell.kind == SYMBOL:
                return True
    return False


def gear_ratio(schematic, position):
    """Product of the numbers next to ``position``, or 0 if fewer than two."""
    gx, gy = position
    values = [
        int(cell.value)
        for (x, y), cell in schematic.items()
        if cell.kind == DIGIT
        and abs(y - gy) <= 1
        and (abs(x - gx) <= 1 or abs(x + cell.width - 1 - gx) <= 1)
    ]
    if len(values) < 2:
        return 0
    return math.prod(values)


def part1(text):
    """Sum of all numbers adjacent to a symbol."""
    schematic = parse_schematic(text)
    return sum(
        int(cell.value)
        for position, cell in schematic.items()
        if cell.kind == DIGIT and is_part_number(schematic, position, cell.width)
    )


def part2(text):
    """Sum of the gear ratios of every '*' symbol."""
    schematic = parse_schematic(text)
    return sum(
        gear_ratio(schematic, position)
        for position, cell in schematic.items()
        if cell.kind == SYMBOL and cell.value == "*"
    )


def main(argv=None):
    text = _read_input(argv)
    print(f"Answer part 1: {part1(text)}")
    print(f"Answer part 2: {part2(text)}")
    return 0