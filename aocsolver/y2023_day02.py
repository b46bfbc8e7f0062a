"""Cube conundrum: games of cubes drawn from a bag."""

import argparse
import math
import sys
from dataclasses import dataclass

_COLOURS = ("red", "green", "blue")


@dataclass(frozen=True)
class Draw:
    """Cubes of each colour shown in one draw."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Game:
    """A game number and the draws made in it."""

    id: int
    draws: tuple


LIMIT = Draw(red=12, green=13, blue=14)


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


def _parse_draw(text):
    counts = {}
    for cubes in text.split(", "):
        parts = cubes.split(" ")
        if len(parts) < 2:
            raise ValueError(f"Invalid cube count {cubes!r}")
        amount = int(parts[0])
        if parts[1] in _COLOURS:
            counts[parts[1]] = amount
    return Draw(**counts)


def parse_game(line):
    """Parse a line like 'Game 1: 3 blue, 4 red; 1 red'."""
    sections = line.split(": ")
    if len(sections) < 2:
        raise ValueError("Invalid row, unable to parse game header")
    header = sections[0].split(" ")
    if len(header) < 2:
        raise ValueError("Invalid row, unable to parse ID")
    game_id = int(header[1])
    return Game(game_id, tuple(_parse_draw(draw) for draw in sections[1].split("; ")))


def parse_games(text):
    """Parse one game per line."""
    return [parse_game(line) for line in text.rstrip("\n").split("\n")]


def minimum_cubes(game):
    """Fewest cubes of each colour that make every draw of the game possible."""
    return Draw(
        red=max((draw.red for draw in game.draws), default=0),
        green=max((draw.green for draw in game.draws), default=0),
        blue=max((draw.blue for draw in game.draws), default=0),
    )


def _possible(game):
    return all(
        draw.red <= LIMIT.red and draw.green <= LIMIT.green and draw.blue <= LIMIT.blue
        for draw in game.draws
    )


def part1(text):
    """Sum of the ids of games possible with 12 red, 13 green and 14 blue cubes."""
    return sum(game.id for game in parse_games(text) if _possible(game))


def part2(text):
    """Sum of the powers of the minimum cube sets of all games."""
    total = 0
    for game in parse_games(text):
        least = minimum_cubes(game)
        total += math.prod((least.red, least.green, least.blue))
    return total


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