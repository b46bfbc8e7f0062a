"""Haunted wasteland: walking a left/right network of nodes."""

import argparse
import sys


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


def parse_network(text):
    """Return the instruction string and a dict of node -> (left, right)."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("Missing node section")
    instructions = sections[0]
    network = {}
    for line in sections[1].split("\n"):
        if not line:
            continue
        parts = line.split(" = (")
        if len(parts) != 2:
            raise ValueError(f"Invalid node line {line!r}")
        name, targets = parts
        branches = targets.split(", ")
        if len(branches) != 2:
            raise ValueError(f"Invalid node line {line!r}")
        network[name] = (branches[0], branches[1][:-1])
    return instructions, network


def _step(network, node, direction):
    left, right = network[node]
    following = left if direction == "L" else right
    if following not in network:
        raise ValueError(f"Unknown node {following!r}")
    return following


def _check(instructions, network, starts):
    if not instructions:
        raise ValueError("No instructions")
    for start in starts:
        if start not in network:
            raise ValueError(f"Unknown node {start!r}")


def steps_to_goal(instructions, network, start, goal):
    """Steps walked from ``start`` until ``goal`` is seen at the end of a pass.

    The goal is only checked after the whole instruction list has been
    followed, so the result is always a multiple of its length.
    """
    _check(instructions, network, [start])
    current = start
    steps = 0
    while current != goal:
        for direction in instructions:
            steps += 1
            current = _step(network, current, direction)
    return steps


def steps_all_to_goal(instructions, network, starts):
    """Steps until every walker has stood on a node ending in 'Z' together.

    Walkers move in step; the count returned is that at the end of the
    instruction pass during which they all arrived.
    """
    _check(instructions, network, starts)
    current = list(starts)
    steps = 0
    while True:
        arrived = False
        for direction in instructions:
            steps += 1
            current = [_step(network, node, direction) for node in current]
            if all(node.endswith("Z") for node in current):
                arrived = True
        if arrived:
            return steps


def part1(text):
    """Steps from AAA to ZZZ."""
    instructions, network = parse_network(text)
    return steps_to_goal(instructions, network, "AAA", "ZZZ")


def part2(text):
    """Steps until all walkers starting on '..A' nodes stand on '..Z' nodes."""
    instructions, network = parse_network(text)
    starts = [name for name in network if name.endswith("A")]
    return steps_all_to_goal(instructions, network, starts)


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