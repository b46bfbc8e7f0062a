import pytest

from aocsolver.y2022_day11 import Monkey, inspection_counts, parse_monkeys, part1, part2

EXAMPLE = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def test_part1_example():
    assert part1(EXAMPLE) == 10605


def test_part2_example():
    assert part2(EXAMPLE) == 2713310158


def test_parse_monkeys_fields():
    monkeys = parse_monkeys(EXAMPLE)
    assert [m.number for m in monkeys] == [0, 1, 2, 3]
    assert monkeys[0].items == [79, 98]
    assert monkeys[1].operation == ("old", "+", "6")
    assert monkeys[2].operation == ("old", "*", "old")
    assert (monkeys[0].test, monkeys[0].if_true, monkeys[0].if_false) == (23, 2, 3)


def test_operate_square():
    monkey = Monkey(0, [], ("old", "*", "old"), 13, 1, 2)
    assert monkey.operate(7) == 49


def test_target_follows_divisibility():
    monkey = Monkey(0, [], ("old", "+", "1"), 7, 4, 5)
    assert monkey.target(14) == 4
    assert monkey.target(15) == 5


def test_invalid_operator_raises():
    with pytest.raises(ValueError):
        Monkey(0, [], ("old", "-", "1"), 7, 1, 2).operate(3)


def test_invalid_operand_raises():
    with pytest.raises(ValueError):
        Monkey(0, [], ("old", "+", "abc"), 7, 1, 2).operate(3)


def test_zero_rounds_count_nothing():
    assert inspection_counts(parse_monkeys(EXAMPLE), 0, True) == [0, 0, 0, 0]


def test_first_round_first_monkey_inspects_its_items():
    monkeys = parse_monkeys(EXAMPLE)
    counts = inspection_counts(monkeys, 1, True)
    assert counts[0] == len(monkeys[0].items)


def test_counts_do_not_mutate_monkeys():
    monkeys = parse_monkeys(EXAMPLE)
    before = [list(m.items) for m in monkeys]
    inspection_counts(monkeys, 20, True)
    assert [m.items for m in monkeys] == before


def test_bad_operation_line_raises():
    broken = EXAMPLE.replace("new = old * 19", "new = old / 19")
    with pytest.raises(ValueError):
        parse_monkeys(broken)


def test_bad_items_raise():
    broken = EXAMPLE.replace("79, 98", "79, x")
    with pytest.raises(ValueError):
        parse_monkeys(broken)


def test_throw_to_missing_monkey_raises():
    broken = EXAMPLE.replace("If false: throw to monkey 1\n", "If false: throw to monkey 9\n")
    with pytest.raises(ValueError):
        part1(broken)