"""Sets of line segments stored as plain text files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from .geometry import Vector

Point = tuple[int, int]
Line = tuple[Point, Point]

_LINE_PATTERN = re.compile(r"\(\s*(-?\d+),\s*(-?\d+)\)->\(\s*(-?\d+),\s*(-?\d+)\)")


def _halve(value: int) -> int:
    """Integer halving that rounds toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


@dataclass
class LineMesh:
    """A list of segments between integer points."""

    lines: list[Line] = field(default_factory=list)

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the segment count, then one ``(x1,y1)->(x2,y2)`` per line.

        The x coordinates are shifted so the mesh is centred horizontally.
        """
        mid_x = 0
        if self.lines:
            xs = [x for line in self.lines for x, _ in line]
            mid_x = _halve(min(xs) + max(xs))

        with open(path, "w", encoding="utf-8") as file:
            file.write(f"{len(self.lines)}\n")
            for (x1, y1), (x2, y2) in self.lines:
                file.write(f"({x1 - mid_x},{y1})->({x2 - mid_x},{y2})\n")

    def load(self, path: Union[str, PathLike]) -> None:
        """Replace the segments with those read from ``path``."""
        with open(path, encoding="utf-8") as file:
            tokens = file.read().split()
        if not tokens:
            raise ValueError("line mesh file is empty")
        try:
            count = int(tokens[0])
        except ValueError:
            raise ValueError(f"invalid segment count: {tokens[0]!r}") from None
        entries = tokens[1:]
        if count < 0 or len(entries) < count:
            raise ValueError(f"expected {count} segments, found {len(entries)}")

        lines: list[Line] = []
        for entry in entries[:count]:
            match = _LINE_PATTERN.fullmatch(entry)
            if match is None:
                raise ValueError(f"malformed segment: {entry!r}")
            x1, y1, x2, y2 = (int(group) for group in match.groups())
            lines.append(((x1, y1), (x2, y2)))
        self.lines = lines

    def translated(self, pos: Vector) -> list[tuple[Vector, Vector]]:
        """The segments as float endpoints offset by ``pos``."""
        return [
            (
                Vector(pos.x + float(x1), pos.y + float(y1)),
                Vector(pos.x + float(x2), pos.y + float(y2)),
            )
            for (x1, y1), (x2, y2) in self.lines
        ]