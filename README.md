# aocsolver

Solutions to a selection of Advent of Code puzzles:

- 2022, days 1 to 14
- 2023, days 1 to 8
- 2024, days 1 to 5

Each day lives in its own module, named `y<year>_day<NN>`, for example
`aocsolver.y2023_day04`. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

Most modules expose `part1(text)` and `part2(text)`, which take the whole
puzzle input as a string and return the answer. Input that cannot be parsed
raises `ValueError`.

```python
from aocsolver import y2024_day01

example = """3   4
4   3
2   5
1   3
3   9
3   3
"""

print(y2024_day01.part1(example))  # 11
print(y2024_day01.part2(example))  # 31
```

A few days have a different entry point because of the shape of the puzzle:

- `y2022_day05.top_crates(text, keep_order)` returns the crates on top of
  each stack as a string; `keep_order=False` moves crates one at a time,
  `keep_order=True` moves them together. `render_stacks(stacks)` draws the
  stacks as text.
- `y2022_day06.find_marker(data, size)` returns the position just after the
  first run of `size` distinct characters, and raises `ValueError` if there
  is none.
- `y2022_day08.parse_forest(text)` returns a `Forest` with
  `visible_count()`, `scenic_score(x, y)` and `best_scenic_score()`.
- `y2022_day09.simulate(text, knots)` returns a `Rope` whose
  `visited_count()` gives the number of positions the tail has visited.
- `y2022_day10.parse_instructions(text)` and `Cpu().run(instructions)` give
  the list of signal strengths; afterwards `render(cpu.framebuffer)` returns
  the screen as text.
- `y2022_day14.render(cave)` draws a cave map, such as one returned by
  `parse_cave(text)`, as text.

## Command line

Every day also has a command that prints both answers:

```
aoc-2022-01 input.txt
aoc-2023-07 input.txt
aoc-2024-05 < input.txt
```

The commands are named `aoc-<year>-<day>` with a two-digit day, one for each
module listed above. Each takes the path of the puzzle input as its only
argument; with no argument, or with `-`, it reads the input from standard
input. Most commands print an error message and exit with status 1 when the
input cannot be parsed.

## What it does not do

The package does not fetch puzzle inputs or submit answers; you supply your
own input file. It covers only the days listed above.