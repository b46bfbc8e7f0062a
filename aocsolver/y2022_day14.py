"""Regolith reservoir: sand falling into a cave of rock."""

import argparse
import sys
from enum import IntEnum

SPAWN = (500, 0)
FLOOR_WIDTH = 99_999

# Straight down, down-left, down-right.
_FALL = ((0, 1), (-1, 1), (1, 1))


class Material(IntEnum):
    """What occupies a cell of the cave."""

    ROCK = 1
    SAND = 2
    AIR = 3
    SPAWNER = 4


_SYMBOLS = {
    Material.ROCK: "#",
    Material.SAND: "o",
    Material.AIR: ".",
    Material.SPAWNER: "+",
}


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


def _near_corner(cave):
    return (
        min((x for x, _ in cave), default=sys.maxsize),
        min((y for _, y in cave), default=sys.maxsize),
    )


def _far_corner(cave):
    return (
        max(0, max((x for x, _ in cave), default=0)),
        max(0, max((y for _, y in cave), default=0)),
    )


def _parse_point(text):
    values = text.split(",")
    if len(values) < 2:
        raise ValueError("Unable to parse rocks, invalid value")
    try:
        x = int(values[0])
    except ValueError:
        raise ValueError("Unable to parse rocks, invalid format on x-axis") from None
    try:
        y = int(values[1])
    except ValueError:
        raise ValueError("Unable to parse rocks, invalid format on y-axis") from None
    return (x, y)


def fill_line(cave, start, end, material):
    """Fill the straight line from ``start`` to ``end`` with ``material``."""
    if start[0] == end[0]:
        low, high = sorted((start[1], end[1]))
        for y in range(low, high + 1):
            cave[(start[0], y)] = material
    else:
        low, high = sorted((start[0], end[0]))
        for x in range(low, high + 1):
            cave[(x, start[1])] = material


def parse_cave(text):
    """Parse rock paths like '498,4 -> 498,6' into a cave map."""
    paths = [
        [_parse_point(point) for point in line.split(" -> ")]
        for line in text.rstrip("\n").split("\n")
    ]
    cave = {}
    for points in paths:
        for start, end in zip(points, points[1:]):
            fill_line(cave, start, end, Material.ROCK)
    return cave


def pour_sand(cave, source=SPAWN):
    """Drop sand from ``source`` into the cave until it stops coming to rest.

    Pouring ends when the source itself is blocked or a grain falls to the
    lowest row the cave held before pouring began. The cave is changed in
    place.
    """
    bottom = _far_corner(cave)[1]
    position = source
    while True:
        for dx, dy in _FALL:
            candidate = (position[0] + dx, position[1] + dy)
            if candidate not in cave:
                position = candidate
                break
        else:
            cave[position] = Material.SAND
            if position == source:
                return
            position = source
        if position[1] >= bottom:
            return


def sand_units(cave):
    """Number of cells holding sand."""
    return sum(1 for material in cave.values() if material == Material.SAND)


def render(cave):
    """Draw the cave, with the sand spawner, as text."""
    grid = dict(cave)
    grid[SPAWN] = Material.SPAWNER
    start_x, start_y = _near_corner(grid)
    end_x, end_y = _far_corner(grid)
    lines = [
        "".join(
            _SYMBOLS[grid.get((x, y), Material.AIR)]
            for x in range(start_x, end_x + 1)
        )
        + "\n"
        for y in range(start_y, end_y + 1)
    ]
    return "".join(lines) + "\n"


def part1(text):
    """Units of sand at rest before sand starts falling into the abyss."""
    cave = parse_cave(text)
    pour_sand(cave, SPAWN)
    return sand_units(cave)


def part2(text):
    """Units of sand at rest once a floor stops the sand and blocks the source."""
    cave = parse_cave(text)
    floor = _far_corner(cave)[1] + 2
    fill_line(cave, (0, floor), (FLOOR_WIDTH, floor), Material.ROCK)
    pour_sand(cave, SPAWN)
    return sand_units(cave)


def main(argv=None):
    text = _read_input(argv)
    try:
        first = part1(text)
        second = part2(text)
    except ValueError as exc:
        print(f"Parsing error: {exc}")
        return 1
    print(f"Answer 1: {first}")
    print(f"Answer 2: {second}")
    return 0