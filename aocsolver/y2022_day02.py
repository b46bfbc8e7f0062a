"""Rock paper scissors strategy guide scoring."""

from enum import IntEnum

from aocsolver.y2022_day01 import _print_answers, _read_input


class Shape(IntEnum):
    """A hand shape; the value is the points it is worth."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


WIN = 6
DRAW = 3
LOSS = 0

_ACTIONS = {
    "A": Shape.ROCK,
    "B": Shape.PAPER,
    "C": Shape.SCISSORS,
    "X": Shape.ROCK,
    "Y": Shape.PAPER,
    "Z": Shape.SCISSORS,
}

# Each shape mapped to the shape it beats.
_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


def parse_matches(text):
    """Parse the guide into (opponent, me) shape pairs."""
    matches = []
    for round_nr, line in enumerate(text.rstrip("\n").split("\n")):
        tokens = line.split(" ")
        for token in tokens:
            if token not in _ACTIONS:
                raise ValueError(f"Invalid action ({token}) in round {round_nr}")
        if len(tokens) != 2:
            raise ValueError(f"Invalid round {round_nr}: expected two actions")
        matches.append((_ACTIONS[tokens[0]], _ACTIONS[tokens[1]]))
    return matches


def match_outcome(opponent, me):
    """Points for the outcome of a round from my point of view."""
    if opponent == me:
        return DRAW
    if _BEATS[me] == opponent:
        return WIN
    return LOSS


def score(opponent, me):
    """Total points for one round."""
    return int(me) + match_outcome(opponent, me)


def part1(text):
    """Score when the second column is the shape to play."""
    return sum(score(opponent, me) for opponent, me in parse_matches(text))


def _choose(opponent, wanted):
    # X (rock) means lose, Y (paper) means draw, Z (scissors) means win.
    if wanted == Shape.ROCK:
        return _BEATS[opponent]
    if wanted == Shape.PAPER:
        return opponent
    return _BEATEN_BY[opponent]


def part2(text):
    """Score when the second column is the outcome to reach."""
    return sum(
        score(opponent, _choose(opponent, wanted))
        for opponent, wanted in parse_matches(text)
    )


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__), (("Answer 1", part1), ("Answer 2", part2))
    )