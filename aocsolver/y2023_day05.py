"""Seed almanac: mapping seed ranges through a chain of range maps."""

import argparse
import sys
from dataclasses import dataclass, field

CHAIN = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)


@dataclass(frozen=True)
class MapEntry:
    """Maps source..source+extent (inclusive) onto destination..destination+extent."""

    destination: int = 0
    source: int = 0
    extent: int = 0


@dataclass
class Almanac:
    """Seed ranges as (start, extent) pairs and the maps of the chain by name."""

    seeds: tuple = ()
    maps: dict = field(default_factory=dict)

    def locations(self):
        """Location ranges reached by all seed ranges, seed by seed."""
        result = []
        for seed in self.seeds:
            ranges = [seed]
            for name in CHAIN:
                ranges = resolve_ranges(ranges, self.maps.get(name, ()))
            result.extend(ranges)
        return result


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


def _overlap(a_start, a_end, b_start, b_end):
    if a_start <= b_end and a_end >= b_start:
        return max(a_start, b_start), min(a_end, b_end)
    return None


def _resolve_entry(span, entry):
    """Return (mapped range or None, leftover ranges) for one map entry."""
    start, extent = span
    span_end = start + extent
    source_end = entry.source + entry.extent
    shared = _overlap(start, span_end, entry.source, source_end)
    if shared is None:
        return None, [span]
    low, high = shared
    leftovers = []
    if start < low:
        leftovers.append((start, entry.source - start - 1))
    if span_end > source_end:
        leftovers.append((source_end + 1, span_end - source_end - 1))
    mapped = (entry.destination + low - entry.source, high - low)
    return mapped, leftovers


def resolve_ranges(ranges, entries):
    """Map (start, extent) ranges through one map; unmapped parts pass through."""
    mapped = []
    pending = list(ranges)
    for entry in entries:
        leftovers = []
        for span in pending:
            destination, rest = _resolve_entry(span, entry)
            leftovers.extend(rest)
            if destination is not None:
                mapped.append(destination)
        pending = leftovers
    mapped.extend(pending)
    if not mapped:
        return list(ranges)
    return mapped


def _parse_numbers(tokens):
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"Invalid seed number, {exc}") from None


def _parse_seeds(line, seed_ranges):
    numbers = _parse_numbers(line.split(" ")[1:])
    if not seed_ranges:
        return tuple((number, 0) for number in numbers)
    if len(numbers) % 2:
        raise ValueError("Seed ranges need a start and a length")
    return tuple(
        (start, length - 1) for start, length in zip(numbers[::2], numbers[1::2])
    )


def _parse_map(rows):
    header = rows[0].split(" ")
    if len(header) < 2:
        raise ValueError("parseMap, invalid header row")
    entries = []
    for row_nr, row in enumerate(rows[1:]):
        values = {}
        for key, token in zip(("destination", "source", "extent"), row.split(" ")):
            try:
                values[key] = int(token)
            except ValueError:
                raise ValueError(
                    "parseMap, unable to parse range values, "
                    f"map: {header[0]}, row: {row_nr}"
                ) from None
        if "extent" in values:
            values["extent"] -= 1
        entries.append(MapEntry(**values))
    return header[0], tuple(entries)


def parse_almanac(text, seed_ranges):
    """Parse the almanac; with ``seed_ranges`` the seeds line holds start/length pairs."""
    lines = (text + "\n").split("\n")
    almanac = Almanac(seeds=_parse_seeds(lines[0], seed_ranges))
    block = []
    for line in lines[1:]:
        if line:
            block.append(line)
            continue
        if not block:
            continue
        name, entries = _parse_map(block)
        if name in CHAIN:
            almanac.maps[name] = entries
        block = []
    return almanac


def _lowest_location(almanac):
    locations = almanac.locations()
    if not locations:
        raise ValueError("No seeds")
    return min(start for start, _ in locations)


def part1(text):
    """Lowest location of any single seed."""
    return _lowest_location(parse_almanac(text, False))


def part2(text):
    """Lowest location of any seed in the seed ranges."""
    return _lowest_location(parse_almanac(text, True))


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