"""Distress signal: ordering nested list packets."""

import json
import math
from functools import cmp_to_key

from aocsolver.y2022_day01 import _print_answers, _read_input

_DIVIDERS = (2, 6)


def parse_packets(text):
    """Parse the input into pairs of packets."""
    pairs = []
    for group in text.rstrip("\n").split("\n\n"):
        lines = group.split("\n")
        if len(lines) != 2:
            raise ValueError(f"Expected two packets per group, got {len(lines)}")
        pairs.append(tuple(json.loads(line) for line in lines))
    return pairs


def compare(left, right):
    """1 if the packets are in the right order, -1 if not, 0 if undecided."""
    left_is_list = isinstance(left, list)
    right_is_list = isinstance(right, list)
    if not left_is_list and not right_is_list:
        if left < right:
            return 1
        if left == right:
            return 0
        return -1
    if not left_is_list:
        left = [left]
    if not right_is_list:
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    if len(left) < len(right):
        return 1
    if len(left) > len(right):
        return -1
    return 0


def part1(text):
    """Sum of the 1-based indices of pairs already in the right order."""
    return sum(
        index
        for index, (left, right) in enumerate(parse_packets(text), 1)
        if compare(left, right) == 1
    )


def part2(text):
    """Product of the positions of the divider packets after sorting."""
    tagged = [(divider, True) for divider in _DIVIDERS]
    tagged.extend(
        (packet, False) for pair in parse_packets(text) for packet in pair
    )
    ordered = sorted(tagged, key=cmp_to_key(lambda a, b: -compare(a[0], b[0])))
    return math.prod(
        position for position, (_, is_divider) in enumerate(ordered, 1) if is_divider
    )


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__),
        (("Answer 1", part1), ("Answer 2", part2)),
        "Error: {exc}",
    )