"""Trebuchet calibration: first and last digit of every line."""

from aocsolver.y2022_day01 import _print_answers, _read_input

WORDS = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

_DIGITS = "0123456789"


def _digits(line, include_words):
    for index, char in enumerate(line):
        if char in _DIGITS:
            yield int(char)
        elif include_words:
            for value, word in enumerate(WORDS):
                if line.startswith(word, index):
                    yield value
                    break


def calibration_sum(text, include_words):
    """Sum over all lines of the two-digit value formed by first and last digit.

    A zero never counts as the first digit; with ``include_words`` spelled
    out digits count as well.
    """
    total = 0
    for line in text.rstrip("\n").split("\n"):
        values = list(_digits(line, include_words))
        first = next((value for value in values if value), 0)
        last = values[-1] if values else 0
        total += first * 10 + last
    return total


def part1(text):
    """Calibration sum counting only numeric digits."""
    return calibration_sum(text, False)


def part2(text):
    """Calibration sum counting spelled out digits too."""
    return calibration_sum(text, True)


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__),
        (("Answer part 1", part1), ("Answer part 2", part2)),
    )