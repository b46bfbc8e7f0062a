"""No space left on device: directory sizes from a terminal session."""

import re
from dataclasses import dataclass, field

from aocsolver.y2022_day01 import _print_answers, _read_input

DISK_SIZE = 70_000_000
UPDATE_SIZE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000

_LISTING = re.compile(r"^(\w+) (.*)")


@dataclass
class File:
    """A plain file and its size."""

    name: str
    size: int


@dataclass(eq=False)
class Directory:
    """A directory holding files and other directories."""

    name: str
    parent: "Directory | None" = field(default=None, repr=False)
    children: list = field(default_factory=list)

    def size(self):
        """Total size of everything below this directory."""
        return sum(
            child.size() if isinstance(child, Directory) else child.size
            for child in self.children
        )

    def _subdirectory(self, name):
        for child in self.children:
            if isinstance(child, Directory) and child.name == name:
                return child
        return None


def _execute(root, cwd, command, args, output):
    """Apply one command with its output and return the new working directory."""
    if command == "cd":
        if args == "..":
            return cwd.parent or cwd
        if args == "/":
            return root
        return cwd._subdirectory(args) or cwd
    if command == "ls":
        for line in output:
            match = _LISTING.match(line)
            if match is None:
                raise ValueError(f"Invalid listing line {line!r}")
            kind, name = match.group(1), match.group(2)
            if kind == "dir":
                cwd.children.append(Directory(name, parent=cwd))
            else:
                try:
                    size = int(kind)
                except ValueError:
                    raise ValueError(f"Invalid file size in {line!r}") from None
                cwd.children.append(File(name, size))
    return cwd


def parse_terminal(text):
    """Rebuild the file tree from the commands and their output."""
    root = Directory("/")
    cwd = root
    command, args, output = "", "", []
    for line in text.split("\n"):
        if not line:
            continue
        if line.startswith("$"):
            cwd = _execute(root, cwd, command, args, output)
            command, args, output = line[2:4], line[4:].strip(), []
        else:
            output.append(line)
    _execute(root, cwd, command, args, output)
    return root


def directory_sizes(root):
    """Sizes of the root and every directory below it, parents first."""
    sizes = [root.size()]
    for child in root.children:
        if isinstance(child, Directory):
            sizes.extend(directory_sizes(child))
    return sizes


def part1(text):
    """Sum of the sizes of all directories of at most 100000."""
    return sum(
        size
        for size in directory_sizes(parse_terminal(text))
        if size <= SMALL_DIRECTORY_LIMIT
    )


def part2(text):
    """Size of the smallest directory whose removal frees enough space."""
    root = parse_terminal(text)
    needed = UPDATE_SIZE - (DISK_SIZE - root.size())
    return min(size for size in directory_sizes(root) if size >= needed)


def main(argv=None):
    return _print_answers(
        _read_input(argv, __doc__),
        (("Answer 1", part1), ("Answer 2", part2)),
        "Error: {exc}",
    )