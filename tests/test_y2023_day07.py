import pytest

from aocsolver.y2023_day07 import (
    Hand,
    card_weights,
    hand_strength,
    parse_hands,
    part1,
    part2,
    total_winnings,
)

EXAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483"""


def _strength(labels, joker):
    weights = card_weights(joker)
    return hand_strength([weights[label] for label in labels], joker)


def test_answer_part1():
    assert part1(EXAMPLE) == 6440


def test_answer_part2():
    assert part2(EXAMPLE) == 5905


def test_total_winnings_matches_parts():
    assert total_winnings(EXAMPLE, False) == 6440
    assert total_winnings(EXAMPLE, True) == 5905


def test_card_weights():
    plain = card_weights(False)
    jokers = card_weights(True)
    assert plain["2"] == 0
    assert plain["A"] == 12
    assert plain["J"] == 9
    assert jokers["J"] == 0
    assert jokers["2"] == 1
    assert jokers["A"] == 12


@pytest.mark.parametrize(
    "labels, strength",
    [
        ("AAAAA", 6),
        ("AA8AA", 5),
        ("23332", 4),
        ("TTT98", 3),
        ("23432", 2),
        ("A23A4", 1),
        ("23456", 0),
        ("KTJJT", 2),
        ("QQQJA", 3),
    ],
)
def test_strength_without_joker(labels, strength):
    assert _strength(labels, False) == strength


@pytest.mark.parametrize(
    "labels, strength",
    [
        ("KTJJT", 5),
        ("QQQJA", 5),
        ("T55J5", 5),
        ("32T3K", 1),
        ("JJJJJ", 6),
        ("JJJ2K", 5),
        ("2233J", 4),
        ("2345J", 1),
    ],
)
def test_strength_with_joker(labels, strength):
    assert _strength(labels, True) == strength


def test_parse_hands():
    hands = parse_hands("32T3K 765\n", False)
    assert hands == [Hand("32T3K", (1, 0, 8, 1, 11), 765, 1)]


def test_unknown_card_raises():
    with pytest.raises(ValueError, match="Unknown card"):
        parse_hands("32X3K 765", False)


def test_invalid_bid_raises():
    with pytest.raises(ValueError, match="Invalid bid"):
        parse_hands("32T3K abc", False)


def test_equal_hands_keep_input_order():
    # The first of two equal hands ranks higher.
    assert total_winnings("22345 10\n22345 1", False) == 21
    assert total_winnings("22345 1\n22345 10", False) == 12