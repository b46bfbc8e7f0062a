"""Scratchcards: points and copies won from winning numbers."""

import argparse
import sys
from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """A scratchcard: its number, the winning numbers and the numbers picked."""

    number: int
    winning: tuple
    picks: tuple

    def matches(self):
        """The picked numbers that are winning numbers, in pick order."""
        return [pick for pick in self.picks if pick in self.winning]

    def points(self):
        """One point for the first match, doubled for every further match."""
        count = len(self.matches())
        return 2 ** (count - 1) if count else 0


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


def parse_card(line):
    """Parse a line like 'Card 1: 41 48 | 83 86 6'."""
    sections = line.split(": ")
    if len(sections) != 2:
        raise ValueError("Invalid format on game")
    header = sections[0].split(" ")
    try:
        number = int(header[-1].strip(" "))
    except ValueError as exc:
        raise ValueError(f"Header err: {exc}") from None
    winning, picks = [], []
    for part_nr, part in enumerate(sections[1].split(" | ")):
        target = winning if part_nr == 0 else picks
        for token in part.split(" "):
            if not token:
                continue
            try:
                target.append(int(token))
            except ValueError as exc:
                raise ValueError(f"nr err: {exc}") from None
    return Card(number, tuple(winning), tuple(picks))


def parse_cards(text):
    """Parse one card per line."""
    return [parse_card(line) for line in text.rstrip("\n").split("\n")]


def part1(text):
    """Total points of all cards."""
    return sum(card.points() for card in parse_cards(text))


def part2(text):
    """Number of cards held once every won copy has been scratched."""
    cards = parse_cards(text)
    first_index = {}
    for index, card in enumerate(cards):
        first_index.setdefault(card.number, index)
    wins = [len(card.matches()) for card in cards]

    total = 0
    wave = Counter(range(len(cards)))
    while wave:
        total += sum(wave.values())
        following = Counter()
        for index, copies in wave.items():
            for offset in range(1, wins[index] + 1):
                won = first_index.get(cards[index].number + offset)
                if won is not None:
                    following[won] += copies
        wave = following
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