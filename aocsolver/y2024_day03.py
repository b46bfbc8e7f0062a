"""Mull it over: summing products from corrupted memory."""

import argparse
import math
import re
import sys

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_OPS = re.compile(r"don't\(\)|do\(\)|mul\([0-9,]+\)")
_MUL_ARGS = re.compile(r"mul\((\d+)(?:,(\d+))?")


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


def parse_mul(text):
    """Number pairs of every well-formed mul(a,b) instruction."""
    return [(int(a), int(b)) for a, b in _MUL.findall(text)]


def _mul_operands(token):
    # Operands that cannot be read stay at 1.
    match = _MUL_ARGS.match(token)
    if match is None:
        return (1, 1)
    second = match.group(2)
    return (int(match.group(1)), int(second) if second else 1)


def parse_ops(text):
    """Number pairs of mul instructions enabled by the latest do()/don't()."""
    pairs = []
    enabled = True
    for token in _OPS.findall(text):
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            pairs.append(_mul_operands(token))
    return pairs


def sum_products(pairs):
    """Sum of the products of the number groups."""
    return sum(math.prod(numbers) for numbers in pairs)


def part1(text):
    """Sum of all mul results."""
    return sum_products(parse_mul(text))


def part2(text):
    """Sum of the mul results that are enabled."""
    return sum_products(parse_ops(text))


def main(argv=None):
    text = _read_input(argv)
    print(f"Answer part 1: {part1(text)}")
    print(f"Answer part 2: {part2(text)}")
    return 0