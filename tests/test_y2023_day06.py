import pytest

from aocsolver.y2023_day06 import Race, parse_races, parse_single_race, part1, part2

EXAMPLE = """Time:      7  15   30
Distance:  9  40  200"""


def test_answer_part1():
    assert part1(EXAMPLE) == 288


def test_answer_part2():
    assert part2(EXAMPLE) == 71503


def test_parse_races():
    assert parse_races(EXAMPLE) == [Race(7, 9), Race(15, 40), Race(30, 200)]


def test_parse_single_race():
    assert parse_single_race(EXAMPLE) == Race(71530, 940200)


def test_winning_holds_values():
    assert list(Race(7, 9).winning_holds()) == [2, 3, 4, 5]


def test_winning_holds_boundary():
    assert list(Race(30, 200).winning_holds()) == list(range(11, 20))


@pytest.mark.parametrize("race", [Race(1, 0), Race(0, 0), Race(4, 4), Race(7, 100)])
def test_no_winning_holds(race):
    assert len(race.winning_holds()) == 0


def test_winning_holds_all_beat_record():
    race = Race(15, 40)
    holds = list(race.winning_holds())
    assert holds == [4, 5, 6, 7, 8, 9, 10, 11]
    assert all((race.time - hold) * hold > race.distance for hold in holds)


def test_too_many_distances_raises():
    with pytest.raises(ValueError):
        parse_races("Time: 7\nDistance: 9 40")