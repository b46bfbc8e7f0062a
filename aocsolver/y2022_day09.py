"""Rope bridge: track where the tail of a moving rope has been."""

from aocsolver.y2022_day01 import _print_answers, _read_input

_DIRECTIONS = {
    "R": (1, 0),
    "L": (-1, 0),
    "U": (0, -1),
    "D": (0, 1),
}


def _sign(value):
    return (value > 0) - (value < 0)


class Rope:
    """A head followed by ``knots`` knots, all starting at the origin."""

    def __init__(self, knots=1):
        self.head = (0, 0)
        self.knots = [(0, 0)] * knots
        self.visited = {(0, 0)}

    def move(self, direction, steps):
        """Move the head one step at a time, dragging the knots along."""
        try:
            dx, dy = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"Unknown direction {direction!r}") from None
        for _ in range(steps):
            self.head = (self.head[0] + dx, self.head[1] + dy)
            leader = self.head
            followed = []
            for x, y in self.knots:
                diff_x, diff_y = leader[0] - x, leader[1] - y
                if abs(diff_x) > 1 or abs(diff_y) > 1:
                    x += _sign(diff_x)
                    y += _sign(diff_y)
                leader = (x, y)
                followed.append(leader)
            self.knots = followed
            if followed:
                self.visited.add(followed[-1])

    def visited_count(self):
        """Number of distinct positions the tail has been at."""
        return len(self.visited)


def simulate(text, knots):
    """Run every motion of the input on a rope with ``knots`` trailing knots."""
    rope = Rope(knots)
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"Invalid motion {line!r}")
        rope.move(parts[0], int(parts[1]))
    return rope


def main(argv=None):
    solvers = [
        (label, lambda text, knots=knots: simulate(text, knots).visited_count())
        for label, knots in (("Answer 1", 1), ("Answer 2", 9))
    ]
    return _print_answers(
        _read_input(argv, __doc__), solvers, "Unable to parse, {exc}"
    )