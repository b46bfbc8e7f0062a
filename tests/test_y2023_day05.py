import pytest

from aocsolver.y2023_day05 import (
    Almanac,
    MapEntry,
    parse_almanac,
    part1,
    part2,
    resolve_ranges,
)

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4"""


def test_answer_part1():
    assert part1(EXAMPLE) == 35


def test_answer_part2():
    assert part2(EXAMPLE) == 46


def test_parse_single_seeds():
    almanac = parse_almanac(EXAMPLE, False)
    assert almanac.seeds == ((79, 0), (14, 0), (55, 0), (13, 0))


def test_parse_seed_ranges():
    almanac = parse_almanac(EXAMPLE, True)
    assert almanac.seeds == ((79, 13), (55, 12))


def test_parse_map_entries_store_inclusive_extent():
    almanac = parse_almanac(EXAMPLE, False)
    assert almanac.maps["seed-to-soil"] == (
        MapEntry(50, 98, 1),
        MapEntry(52, 50, 47),
    )


def test_locations_of_single_seeds():
    almanac = parse_almanac(EXAMPLE, False)
    assert [start for start, _ in almanac.locations()] == [82, 43, 86, 35]


def test_resolve_inside_entry():
    entries = [MapEntry(50, 98, 1), MapEntry(52, 50, 47)]
    assert resolve_ranges([(79, 0)], entries) == [(81, 0)]


def test_resolve_unmapped_passes_through():
    assert resolve_ranges([(10, 0)], [MapEntry(50, 98, 1)]) == [(10, 0)]


def test_resolve_splits_range():
    result = resolve_ranges([(45, 10)], [MapEntry(100, 50, 4)])
    assert result == [(100, 4), (45, 4), (55, 0)]


def test_resolve_without_entries_keeps_ranges():
    assert resolve_ranges([(3, 2)], []) == [(3, 2)]


def test_missing_map_is_identity():
    almanac = Almanac(seeds=((7, 0),))
    assert almanac.locations() == [(7, 0)]


def test_bad_map_row_raises():
    text = "seeds: 1\n\nseed-to-soil map:\n50 x 2\n"
    with pytest.raises(ValueError, match="seed-to-soil"):
        parse_almanac(text, False)


def test_odd_seed_range_count_raises():
    with pytest.raises(ValueError):
        parse_almanac("seeds: 1 2 3\n", True)


def test_no_seeds_raises():
    with pytest.raises(ValueError):
        part1("seeds:\n")