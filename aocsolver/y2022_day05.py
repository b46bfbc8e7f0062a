"""Supply stacks: crate rearrangement by a crane."""

import argparse
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Instruction:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (zero-based)."""

    count: int
    source: int
    target: int


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


def parse_stacks(text):
    """Parse the drawing into stacks, each listed from the top crate down."""
    rows = text.split("\n")[:-1]
    if not rows:
        return []
    columns = len(rows[0]) // 4 + 1
    stacks = []
    for column in range(columns):
        position = column * 4 + 1
        stacks.append(
            [row[position] for row in rows if position < len(row) and row[position] != " "]
        )
    return stacks


def parse_instruction(line):
    """Parse a line like 'move 1 from 2 to 1'."""
    parts = line.split(" ")
    if len(parts) != 6:
        raise ValueError("Invalid instruction row")
    try:
        count, source, target = int(parts[1]), int(parts[3]), int(parts[5])
    except ValueError as exc:
        raise ValueError(f"Invalid instruction number, {exc}") from exc
    return Instruction(count=count, source=source - 1, target=target - 1)


def parse_instructions(text):
    """Parse all non-empty instruction lines."""
    instructions = []
    for row_nr, line in enumerate(text.split("\n"), 1):
        if not line:
            continue
        try:
            instructions.append(parse_instruction(line))
        except ValueError as exc:
            raise ValueError(f"Error at row: {row_nr}, {exc}") from exc
    return instructions


def parse_file(text):
    """Split the input into its stacks and its instructions."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("Missing instruction section")
    return parse_stacks(sections[0]), parse_instructions(sections[1])


def apply_moves(stacks, instructions, keep_order):
    """Return new stacks after running the instructions.

    With ``keep_order`` the crates of one move keep their order; otherwise
    they are moved one at a time and so end up reversed.
    """
    stacks = [list(stack) for stack in stacks]
    for ins in instructions:
        source = stacks[ins.source]
        if ins.count > len(source):
            raise ValueError(
                f"Cannot move {ins.count} crates from stack {ins.source + 1}"
            )
        moved = source[: ins.count]
        if not keep_order:
            moved.reverse()
        stacks[ins.source] = source[ins.count :]
        stacks[ins.target] = moved + stacks[ins.target]
    return stacks


def render_stacks(stacks):
    """Draw the stacks the way the puzzle input shows them."""
    height = max((len(stack) for stack in stacks), default=0)
    lines = []
    for row in range(height):
        cells = []
        for stack in stacks:
            key = row - (height - len(stack))
            cells.append(f"[{stack[key]}] " if 0 <= key < len(stack) else "    ")
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def _tops(stacks):
    tops = []
    for number, stack in enumerate(stacks, 1):
        if not stack:
            raise ValueError(f"Stack {number} is empty")
        tops.append(stack[0])
    return "".join(tops)


def top_crates(text, keep_order):
    """The crates on top of each stack after all moves."""
    stacks, instructions = parse_file(text)
    return _tops(apply_moves(stacks, instructions, keep_order))


def main(argv=None):
    text = _read_input(argv)
    try:
        stacks, instructions = parse_file(text)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    for keep_order in (False, True):
        try:
            final = apply_moves(stacks, instructions, keep_order)
            answer = _tops(final)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 1
        print(render_stacks(final), end="")
        print(f"\nAnswer: {answer}")
        if not keep_order:
            print("\n\n\n")
    return 0