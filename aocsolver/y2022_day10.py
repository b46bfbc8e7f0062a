"""Cathode-ray tube: a tiny CPU driving a character display."""

from dataclasses import dataclass

from aocsolver.y2022_day01 import _read_input

WIDTH = 40
HEIGHT = 6

_DURATION = {"noop": 1, "addx": 2}


@dataclass(frozen=True)
class Instruction:
    """One CPU instruction and its argument."""

    command: str
    value: int = 0


def _blank_frame():
    return [["."] * WIDTH for _ in range(HEIGHT)]


class Cpu:
    """The CPU state: register X and the display it draws on."""

    def __init__(self):
        self.x = 1
        self.framebuffer = _blank_frame()

    def _draw(self, cycle):
        column = (cycle - 1) % WIDTH
        if self.x <= column + 1 <= self.x + 2:
            row = cycle // WIDTH
            if row < HEIGHT:
                self.framebuffer[row][column] = "#"

    def run(self, instructions):
        """Execute the program and return the sampled signal strengths."""
        self.framebuffer = _blank_frame()
        signals = []
        cycle = 0
        for instruction in instructions:
            try:
                duration = _DURATION[instruction.command]
            except KeyError:
                raise ValueError(
                    f"Unknown instruction {instruction.command!r}"
                ) from None
            for _ in range(duration):
                cycle += 1
                self._draw(cycle)
                if (cycle - 20) % 40 == 0:
                    signals.append(self.x * cycle)
            if instruction.command == "addx":
                self.x += instruction.value
        return signals


def parse_instructions(text):
    """Parse one instruction per non-empty line."""
    instructions = []
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(" ")
        value = int(parts[1]) if len(parts) > 1 else 0
        instructions.append(Instruction(parts[0], value))
    return instructions


def render(framebuffer):
    """The display as text, one line per row."""
    return "".join("".join(row) + "\n" for row in framebuffer)


def main(argv=None):
    instructions = parse_instructions(_read_input(argv, __doc__))
    cpu = Cpu()
    print("Part 1:", sum(cpu.run(instructions)))
    print("Part 2:")
    print(render(cpu.framebuffer), end="")
    return 0