"""Tuning trouble: find the first marker of distinct characters."""

from aocsolver.y2022_day01 import _read_input


def all_unique(chunk):
    """True if no character repeats in the chunk."""
    return len(set(chunk)) == len(chunk)


def find_marker(data, size):
    """Number of characters read when the first ``size`` distinct ones end."""
    for start in range(len(data)):
        end = start + size
        if end > len(data):
            break
        if all_unique(data[start:end]):
            return end
    raise ValueError("Unable to find answer")


def _marker_or_zero(data, size):
    try:
        return find_marker(data, size)
    except ValueError:
        return 0


def main(argv=None):
    text = _read_input(argv, __doc__)
    first, second = (_marker_or_zero(text, size) for size in (4, 14))
    print(f"Answer 1: {first}\nAnswer 2: {second}")
    return 0