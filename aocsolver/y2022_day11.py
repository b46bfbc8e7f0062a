"""Monkey in the middle: monkeys passing items by worry level."""

import argparse
import heapq
import math
import re
import sys
from collections import deque
from dataclasses import dataclass, field

_HEADER = re.compile(r"Monkey (\d+):")
_ITEMS = re.compile(r"Starting items:(.*)")
_OPERATION = re.compile(r"Operation: new = ([a-z0-9]+) (\*|\+) ([a-z0-9]+)")


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


def _operand(token, value):
    if token == "old":
        return value
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Invalid operand {token!r}") from None


@dataclass
class Monkey:
    """A monkey, its items and its throwing rule."""

    number: int
    items: list = field(default_factory=list)
    operation: tuple = ("old", "+", "0")
    test: int = 1
    if_true: int = 0
    if_false: int = 0

    def operate(self, value):
        """New worry level after this monkey inspects an item."""
        left = _operand(self.operation[0], value)
        right = _operand(self.operation[2], value)
        operator = self.operation[1]
        if operator == "*":
            return left * right
        if operator == "+":
            return left + right
        raise ValueError("invalid operation")

    def target(self, value):
        """Index of the monkey the item is thrown to."""
        return self.if_true if value % self.test == 0 else self.if_false


def _last_int(line, what):
    try:
        return int(line.rsplit(" ", 1)[-1])
    except ValueError as exc:
        raise ValueError(f"Unable to parse {what}, {exc}") from None


def _parse_monkey(lines):
    if len(lines) < 6:
        raise ValueError("Incomplete monkey description")
    header = _HEADER.search(lines[0])
    if header is None:
        raise ValueError("Unable to parse monkey nr")
    items_match = _ITEMS.search(lines[1])
    if items_match is None:
        raise ValueError("Unable to parse items")
    items = []
    for idx, raw in enumerate(items_match.group(1).split(",")):
        try:
            items.append(int(raw.strip()))
        except ValueError as exc:
            raise ValueError(f"Unable to parse items (idx: {idx}), {exc}") from None
    operation = _OPERATION.search(lines[2])
    if operation is None:
        raise ValueError("Unable to parse operation")
    return Monkey(
        number=int(header.group(1)),
        items=items,
        operation=operation.groups(),
        test=_last_int(lines[3], "test value"),
        if_true=_last_int(lines[4], "test pass value"),
        if_false=_last_int(lines[5], "test fail value"),
    )


def parse_monkeys(text):
    """Parse every monkey block of the input."""
    return [
        _parse_monkey(block.split("\n"))
        for block in text.strip("\n").split("\n\n")
    ]


def inspection_counts(monkeys, rounds, relieved):
    """How many items each monkey inspects over the given rounds.

    With ``relieved`` the worry level is divided by three after each
    inspection; otherwise it is kept small modulo the product of all tests.
    The monkeys themselves are left unchanged.
    """
    for index, monkey in enumerate(monkeys):
        for target in (monkey.if_true, monkey.if_false):
            if not 0 <= target < len(monkeys) or target == index:
                raise ValueError(f"Monkey {monkey.number} throws to invalid monkey {target}")
    queues = [deque(monkey.items) for monkey in monkeys]
    counts = [0] * len(monkeys)
    modulus = math.prod(monkey.test for monkey in monkeys)
    for _ in range(rounds):
        for index, monkey in enumerate(monkeys):
            queue = queues[index]
            while queue:
                worry = monkey.operate(queue.popleft())
                counts[index] += 1
                worry = worry // 3 if relieved else worry % modulus
                queues[monkey.target(worry)].append(worry)
    return counts


def _monkey_business(counts):
    if len(counts) < 2:
        raise ValueError("At least two monkeys are needed")
    first, second = heapq.nlargest(2, counts)
    return first * second


def part1(text):
    """Monkey business after 20 relieved rounds."""
    return _monkey_business(inspection_counts(parse_monkeys(text), 20, True))


def part2(text):
    """Monkey business after 10000 rounds without relief."""
    return _monkey_business(inspection_counts(parse_monkeys(text), 10_000, False))


def main(argv=None):
    text = _read_input(argv)
    try:
        monkeys = parse_monkeys(text)
        counts = inspection_counts(monkeys, 20, True)
        first = _monkey_business(counts)
        second = part2(text)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    for monkey, count in zip(monkeys, counts):
        print(f"Monkey {monkey.number}, Inspected {count}")
    print(f"Answer 1: {first}")
    print(f"Answer 2: {second}")
    return 0