"""Boat races: how many button hold times beat the record."""

import argparse
import math
import sys
from dataclasses import dataclass

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Race:
    """A race's duration and the record distance to beat."""

    time: int
    distance: int = 0

    def _travelled(self, hold):
        return (self.time - hold) * hold

    def winning_holds(self):
        """Hold times that beat the record, in increasing order."""
        if self.time < 2:
            return range(0)
        peak = self.time // 2
        if self._travelled(peak) <= self.distance:
            return range(0)
        low, high = 1, peak
        while low < high:
            middle = (low + high) // 2
            if self._travelled(middle) > self.distance:
                high = middle
            else:
                low = middle + 1
        return range(low, self.time - low + 1)


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


def parse_races(text):
    """Parse the times row and the distances row into separate races."""
    races = []
    for row_nr, row in enumerate(text.split("\n")):
        column = 0
        for token in row.split(" "):
            if not token or token[0] not in _DIGITS:
                continue
            value = int(token)
            if row_nr == 0:
                races.append(Race(time=value))
            else:
                if column >= len(races):
                    raise ValueError("More distances than times")
                races[column] = Race(races[column].time, value)
                column += 1
    return races


def parse_single_race(text):
    """Read each row as one number, ignoring the spaces between its digits."""
    time = distance = 0
    for row_nr, row in enumerate(text.rstrip("\n").split("\n")):
        digits = "".join(char for char in row if char in _DIGITS)
        value = int(digits) if digits else 0
        if row_nr == 0:
            time = value
        else:
            distance = value
    return Race(time, distance)


def part1(text):
    """Product of the number of winning hold times of every race."""
    return math.prod(len(race.winning_holds()) for race in parse_races(text))


def part2(text):
    """Number of winning hold times of the one long race."""
    return len(parse_single_race(text).winning_holds())


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