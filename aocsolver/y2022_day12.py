"""Hill climbing: shortest paths over a height map."""

from collections import deque

from aocsolver.y2022_day01 import _print_answers, _read_input

START = "S"
END = "E"

# Left, right, down, up.
_MOVES = ((-1, 0), (1, 0), (0, 1), (0, -1))


def parse_grid(text):
    """Split the height map into its rows."""
    return text.rstrip("\n").split("\n")


def find_char(grid, char):
    """Position (x, y) of the first occurrence of ``char``."""
    for y, row in enumerate(grid):
        x = row.find(char)
        if x != -1:
            return (x, y)
    raise ValueError(f"unable to find {char}")


def _elevation(char):
    return "z" if char == END else char


def can_visit(current, candidate, reverse=False):
    """True if a step from square ``current`` to ``candidate`` is allowed.

    Going forward a step may climb at most one level, and the start square
    may step anywhere. Going in ``reverse`` a step may descend at most one
    level. The end square has the height of 'z'.
    """
    current = _elevation(current)
    candidate = _elevation(candidate)
    if reverse:
        return ord(current) - 1 <= ord(candidate)
    return ord(candidate) - 1 <= ord(current) or current == START


def neighbours(grid, position, reverse=False):
    """The squares next to ``position`` that can be stepped to."""
    x, y = position
    here = grid[y][x]
    reachable = []
    for dx, dy in _MOVES:
        cx, cy = x + dx, y + dy
        if not (0 <= cy < len(grid) and 0 <= cx < len(grid[cy])):
            continue
        if can_visit(here, grid[cy][cx], reverse):
            reachable.append((cx, cy))
    return reachable


def shortest_path(grid, start, is_goal, reverse=False):
    """Fewest steps from ``start`` to a position for which ``is_goal`` holds."""
    queue = deque([start])
    distance = {start: 0}
    while queue:
        position = queue.popleft()
        if is_goal(position):
            return distance[position]
        for neighbour in neighbours(grid, position, reverse):
            if neighbour not in distance:
                distance[neighbour] = distance[position] + 1
                queue.append(neighbour)
    raise ValueError("Unable to find end")


def part1(text):
    """Fewest steps from the start square to the end square."""
    grid = parse_grid(text)
    start = find_char(grid, START)
    end = find_char(grid, END)
    return shortest_path(grid, start, lambda position: position == end)


def part2(text):
    """Fewest steps from any square of height 'a' to the end square."""
    grid = parse_grid(text)
    start = find_char(grid, END)
    return shortest_path(
        grid,
        start,
        lambda position: grid[position[1]][position[0]] == "a",
        reverse=True,
    )


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__),
        (("Answer 1", part1), ("Answer 2", part2)),
        "Error: {exc}",
    )