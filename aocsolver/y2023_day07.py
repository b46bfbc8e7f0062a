"""Camel cards: ranking poker-like hands and totalling winnings."""

import argparse
import sys
from collections import Counter
from dataclasses import dataclass

_ORDER = "23456789TJQKA"
_JOKER_ORDER = "J23456789TQKA"


@dataclass(frozen=True)
class Hand:
    """A hand of cards, its card weights, its bid and its type strength."""

    raw: str
    cards: tuple
    bid: int
    strength: int


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


def card_weights(joker):
    """Weight of every card label; with ``joker`` the J is the weakest card."""
    order = _JOKER_ORDER if joker else _ORDER
    return {label: weight for weight, label in enumerate(order)}


def hand_strength(cards, joker):
    """Type of a hand of card weights, from 0 (high card) to 6 (five of a kind).

    With ``joker`` cards of weight 0 join the most common other card.
    """
    counts = Counter(cards)
    jokers = counts[0] if joker else 0
    if joker and 0 < jokers < 5:
        del counts[0]
    else:
        jokers = 0
    ordered = sorted(counts.values(), reverse=True)
    if ordered:
        ordered[0] += jokers
    first = ordered[0] if ordered else 0
    second = ordered[1] if len(ordered) > 1 else 0
    if first == 5:
        return 6
    if first == 4:
        return 5
    if first == 3:
        return 4 if second == 2 else 3
    if first == 2:
        return 2 if second == 2 else 1
    return 0


def parse_hands(text, joker):
    """Parse lines like '32T3K 765' into hands."""
    weights = card_weights(joker)
    hands = []
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"Invalid hand {line!r}")
        try:
            cards = tuple(weights[label] for label in parts[0])
        except KeyError as exc:
            raise ValueError(f"Unknown card {exc.args[0]!r}") from None
        try:
            bid = int(parts[1])
        except ValueError:
            raise ValueError(f"Invalid bid {parts[1]!r}") from None
        hands.append(Hand(parts[0], cards, bid, hand_strength(cards, joker)))
    return hands


def total_winnings(text, joker):
    """Sum of every bid multiplied by its hand's rank, the weakest being rank 1."""
    hands = parse_hands(text, joker)
    ranked = sorted(hands, key=lambda hand: (hand.strength, hand.cards), reverse=True)
    count = len(ranked)
    return sum((count - place) * hand.bid for place, hand in enumerate(ranked))


def part1(text):
    """Total winnings with J as a jack."""
    return total_winnings(text, False)


def part2(text):
    """Total winnings with J as a joker."""
    return total_winnings(text, True)


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