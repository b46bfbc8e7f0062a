"""Treetop tree house: visibility and scenic scores in a forest grid."""

import argparse
import math
import sys
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")

# Order of viewing distances: top, bottom, left, right.
_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


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


@dataclass(frozen=True)
class Forest:
    """A rectangular grid of tree heights, indexed as heights[y][x]."""

    heights: tuple

    @property
    def rows(self):
        return len(self.heights)

    @property
    def columns(self):
        return len(self.heights[0]) if self.heights else 0

    def _sight_lines(self):
        for y in range(self.rows):
            line = [(x, y) for x in range(self.columns)]
            yield line
            yield line[::-1]
        for x in range(self.columns):
            line = [(x, y) for y in range(self.rows)]
            yield line
            yield line[::-1]

    def visible_count(self):
        """Number of trees visible from outside the grid."""
        visible = set()
        for line in self._sight_lines():
            tallest = -1
            for x, y in line:
                height = self.heights[y][x]
                if height > tallest:
                    visible.add((x, y))
                    tallest = height
        return len(visible)

    def viewing_distances(self, x, y):
        """Trees seen from (x, y) looking up, down, left and right."""
        if not (0 <= y < self.rows and 0 <= x < self.columns):
            raise IndexError(f"Position ({x}, {y}) is outside the forest")
        own = self.heights[y][x]
        distances = []
        for dx, dy in _DIRECTIONS:
            distance = 0
            cx, cy = x + dx, y + dy
            while 0 <= cx < self.columns and 0 <= cy < self.rows:
                distance += 1
                if self.heights[cy][cx] >= own:
                    break
                cx += dx
                cy += dy
            distances.append(distance)
        return tuple(distances)

    def scenic_score(self, x, y):
        """Product of the four viewing distances."""
        return math.prod(self.viewing_distances(x, y))

    def best_scenic_score(self):
        """Highest scenic score of any tree."""
        return max(
            (
                self.scenic_score(x, y)
                for y in range(self.rows)
                for x in range(self.columns)
            ),
            default=0,
        )


def parse_forest(text):
    """Parse rows of digits into a Forest."""
    lines = text.rstrip("\n").split("\n")
    if not lines[0]:
        raise ValueError("Empty forest")
    width = len(lines[0])
    heights = []
    for row_nr, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Row {row_nr} has length {len(line)}, expected {width}")
        if not set(line) <= _DIGITS:
            raise ValueError(f"Row {row_nr} contains a non-digit")
        heights.append(tuple(int(char) for char in line))
    return Forest(tuple(heights))


def main(argv=None):
    try:
        forest = parse_forest(_read_input(argv))
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Answer 1: {forest.visible_count()}")
    print(f"Answer 2: {forest.best_scenic_score()}")
    return 0