"""Bookkeeping for lines of on-screen display text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .color import Color


@dataclass
class OSDLine:
    """One line of text anchored in [-1, 1] screen space."""

    id: int
    x: float
    y: float
    text: str = ""
    size: int = 16
    color: Color = field(default_factory=lambda: Color.WHITE)


class OSDText:
    """A set of text lines for an on-screen display, addressed by id."""

    def __init__(self, use_hdpi: bool = False) -> None:
        self.use_hdpi = use_hdpi
        self.width = 0
        self.height = 0
        self.sx = 0.0
        self.sy = 0.0
        self._next_id = 0
        self._lines: dict[int, OSDLine] = {}

    def clear(self) -> None:
        """Remove all lines."""
        self._lines.clear()

    def resize(self, width: int, height: int) -> None:
        """Record a new context size and the matching pixel scale factors."""
        if width <= 0 or height <= 0:
            raise ValueError("display size must be positive")
        self.width, self.height = width, height
        self.sx = 2.0 / width
        self.sy = 2.0 / height

    def add_line(self, x: float, y: float, text: str = "", size: int = 16,
                 color: Color = Color.WHITE) -> int:
        """Add a line and return its id."""
        line_id = self._next_id
        self._next_id += 1
        self._lines[line_id] = OSDLine(line_id, x, y, text, size, color)
        return line_id

    def del_line(self, line_id: int) -> None:
        """Remove a line; unknown ids are ignored."""
        self._lines.pop(line_id, None)

    def set_anchor(self, line_id: int, x: float, y: float) -> None:
        line = self._lines.get(line_id)
        if line is not None:
            line.x, line.y = x, y

    def set_text(self, line_id: int, text: str) -> None:
        line = self._lines.get(line_id)
        if line is not None:
            line.text = text

    def set_size(self, line_id: int, size: int) -> None:
        line = self._lines.get(line_id)
        if line is not None:
            line.size = size

    def set_color(self, line_id: int, color: Color) -> None:
        line = self._lines.get(line_id)
        if line is not None:
            line.color = color

    def line(self, line_id: int) -> OSDLine:
        """Return the line with the given id; raise KeyError if there is none."""
        return self._lines[line_id]

    def __iter__(self) -> Iterator[OSDLine]:
        return iter(list(self._lines.values()))

    def __len__(self) -> int:
        return len(self._lines)