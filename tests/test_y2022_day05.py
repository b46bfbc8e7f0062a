import pytest

from aocsolver import y2022_day05 as day
from aocsolver.y2022_day05 import Instruction

DRAWING = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 "
)
MOVES = (
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)
EXAMPLE = DRAWING + "\n\n" + MOVES


def test_parse_stacks():
    assert day.parse_stacks(DRAWING) == [["N", "Z"], ["D", "C", "M"], ["P"]]


def test_render_round_trip():
    rendered = day.render_stacks(day.parse_stacks(DRAWING))
    expected = [line.rstrip() for line in DRAWING.split("\n")[:-1]]
    assert [line.rstrip() for line in rendered.splitlines()] == expected


def test_parse_instruction_is_zero_based():
    assert day.parse_instruction("move 3 from 1 to 3") == Instruction(3, 0, 2)


def test_parse_instruction_wrong_length():
    with pytest.raises(ValueError, match="Invalid instruction row"):
        day.parse_instruction("move 1 from 2")


def test_parse_instructions_reports_row():
    with pytest.raises(ValueError, match="row: 2"):
        day.parse_instructions("move 1 from 2 to 1\nmove x from 1 to 2\n")


def test_parse_instructions_skips_blank_lines():
    assert len(day.parse_instructions(MOVES)) == 4


def test_apply_moves_order():
    stacks = [["a", "b", "c"], []]
    ins = [Instruction(2, 0, 1)]
    assert day.apply_moves(stacks, ins, True) == [["c"], ["a", "b"]]
    assert day.apply_moves(stacks, ins, False) == [["c"], ["b", "a"]]
    assert stacks == [["a", "b", "c"], []]


def test_apply_moves_too_many():
    with pytest.raises(ValueError):
        day.apply_moves([["a"], []], [Instruction(2, 0, 1)], True)


def test_moves_conserve_crates():
    stacks, instructions = day.parse_file(EXAMPLE)
    for keep_order in (False, True):
        final = day.apply_moves(stacks, instructions, keep_order)
        assert sorted(c for s in final for c in s) == sorted(c for s in stacks for c in s)


def test_example():
    assert day.top_crates(EXAMPLE, False) == "CMZ"
    assert day.top_crates(EXAMPLE, True) == "MCD"


def test_empty_stack_on_top_crates():
    text = DRAWING + "\n\nmove 1 from 3 to 1\n"
    with pytest.raises(ValueError, match="empty"):
        day.top_crates(text, True)