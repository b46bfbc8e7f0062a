import pytest

from aocsolver.y2023_day08 import (
    parse_network,
    part1,
    part2,
    steps_all_to_goal,
    steps_to_goal,
)


def _network_text(instructions, network):
    nodes = "\n".join(f"{node} = ({left}, {right})" for node, (left, right) in network.items())
    return f"{instructions}\n\n{nodes}"


FIRST_NETWORK = {
    "AAA": ("BBB", "CCC"),
    "BBB": ("DDD", "EEE"),
    "CCC": ("ZZZ", "GGG"),
    "DDD": ("DDD", "DDD"),
    "EEE": ("EEE", "EEE"),
    "GGG": ("GGG", "GGG"),
    "ZZZ": ("ZZZ", "ZZZ"),
}
SECOND_NETWORK = {
    "AAA": ("BBB", "BBB"),
    "BBB": ("AAA", "ZZZ"),
    "ZZZ": ("ZZZ", "ZZZ"),
}
GHOST_NETWORK = {
    "11A": ("11B", "XXX"),
    "11B": ("XXX", "11Z"),
    "11Z": ("11B", "XXX"),
    "22A": ("22B", "XXX"),
    "22B": ("22C", "22C"),
    "22C": ("22Z", "22Z"),
    "22Z": ("22B", "22B"),
    "XXX": ("XXX", "XXX"),
}

EXAMPLE = _network_text("RL", FIRST_NETWORK)
EXAMPLE2 = _network_text("LLR", SECOND_NETWORK) + "\n"
EXAMPLE_PART2 = _network_text("LR", GHOST_NETWORK)


@pytest.mark.parametrize(("text", "expected"), [(EXAMPLE, 2), (EXAMPLE2, 6)])
def test_part1_examples(text, expected):
    assert part1(text) == expected


def test_part2_example():
    assert part2(EXAMPLE_PART2) == 6


def test_parse_network():
    instructions, network = parse_network(EXAMPLE2)
    assert instructions == "LLR"
    assert network == SECOND_NETWORK


def test_goal_checked_at_end_of_pass():
    network = {"AAA": ("ZZZ", "AAA"), "ZZZ": ("ZZZ", "ZZZ")}
    assert steps_to_goal("LR", network, "AAA", "ZZZ") == 2


@pytest.mark.parametrize(
    "network",
    [{"AAA": ("BBB", "BBB")}, {"ZZZ": ("ZZZ", "ZZZ")}],
)
def test_missing_node_raises(network):
    with pytest.raises(ValueError):
        steps_to_goal("L", network, "AAA", "ZZZ")


@pytest.mark.parametrize(("starts", "expected"), [(["11A"], 2), (["11A", "22A"], 6)])
def test_all_walkers(starts, expected):
    assert steps_all_to_goal("LR", GHOST_NETWORK, starts) == expected


def test_missing_node_section():
    with pytest.raises(ValueError):
        parse_network("LR")