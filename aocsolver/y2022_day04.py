"""Camp cleanup: overlapping section assignments."""

from aocsolver.y2022_day01 import _print_answers, _read_input


def _parse_range(text):
    bounds = text.split("-")
    if len(bounds) != 2:
        raise ValueError(f"Invalid range {text!r}")
    return int(bounds[0]), int(bounds[1])


def parse_pairs(text):
    """Parse lines like '2-4,6-8' into pairs of (start, end) ranges."""
    pairs = []
    for line in text.rstrip("\n").split("\n"):
        ranges = line.split(",")
        if len(ranges) != 2:
            raise ValueError(f"Invalid pair {line!r}")
        pairs.append((_parse_range(ranges[0]), _parse_range(ranges[1])))
    return pairs


def fully_contains(first, second):
    """True if either range contains the other completely."""
    return (first[0] >= second[0] and first[1] <= second[1]) or (
        second[0] >= first[0] and second[1] <= first[1]
    )


def overlaps(first, second):
    """True if the ranges share at least one section."""
    return first[0] <= second[1] and first[1] >= second[0]


def _count(text, predicate):
    return sum(1 for first, second in parse_pairs(text) if predicate(first, second))


def part1(text):
    """Number of pairs where one range fully contains the other."""
    return _count(text, fully_contains)


def part2(text):
    """Number of pairs whose ranges overlap."""
    return _count(text, overlaps)


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__), (("Part 1", part1), ("Part 2", part2))
    )