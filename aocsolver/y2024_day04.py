"""Ceres search: counting XMAS in a word search."""

import argparse
import sys

_DIRECTIONS = (
    (-1, 0), (1, 0),
    (0, 1), (0, -1),
    (1, 1), (-1, -1),
    (1, -1), (-1, 1),
)

_DIAGONAL_PAIRS = ({"M", "S"},)


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


def parse_grid(text):
    """Rows of the word search."""
    return text.rstrip("\n").split("\n")


def _word_at(grid, y, x, dy, dx, word):
    for char in word:
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            return False
        if grid[y][x] != char:
            return False
        y += dy
        x += dx
    return True


def count_word(grid, word):
    """Occurrences of ``word`` in any of the eight directions."""
    return sum(
        1
        for y, row in enumerate(grid)
        for x in range(len(row))
        for dy, dx in _DIRECTIONS
        if _word_at(grid, y, x, dy, dx, word)
    )


def _is_x_mas(grid, y, x):
    if grid[y + 1][x + 1] != "A":
        return False
    falling = {grid[y][x], grid[y + 2][x + 2]}
    rising = {grid[y + 2][x], grid[y][x + 2]}
    return falling == {"M", "S"} and rising == {"M", "S"}


def count_x_mas(grid):
    """Number of 3x3 squares holding two diagonal MAS words crossing at A."""
    return sum(
        1
        for y in range(len(grid) - 2)
        for x in range(len(grid[y]) - 2)
        if _is_x_mas(grid, y, x)
    )


def part1(text):
    """Occurrences of XMAS."""
    return count_word(parse_grid(text), "XMAS")


def part2(text):
    """Occurrences of the X-shaped MAS."""
    return count_x_mas(parse_grid(text))


def main(argv=None):
    text = _read_input(argv)
    print(f"Answer part 1: {part1(text)}")
    print(f"Answer part 2: {part2(text)}")
    return 0