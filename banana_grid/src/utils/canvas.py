"""Tiny text canvas for eyeballing grid positions in a terminal."""

from __future__ import annotations

from typing import Any, List

from banana_grid.src.core.errors import OutOfBounds
from banana_grid.src.core.grid import Grid
from banana_grid.src.core.grid_point import to_point
from banana_grid.src.core.size_2d import to_size

BLANK = " "


class Canvas:
    """Character grid; blanks render as ``.``."""

    def __init__(self, size: Any) -> None:
        self.size = to_size(size)
        self._glyphs: Grid[str] = Grid.new(self.size, BLANK)

    def put(self, pos: Any, glyph: str) -> None:
        if len(glyph) != 1:
            raise ValueError("glyph must be a single character")
        if not self._glyphs.set(pos, glyph):
            raise OutOfBounds(to_point(pos), self.size)

    def render(self) -> str:
        """Return the canvas with a column header and numbered rows."""
        lines: List[str] = [f"{'':>4}" + "".join(str(i) for i in range(self.size.width))]
        for i, row in enumerate(self._glyphs.rows()):
            lines.append(f"{i:>3} " + "".join(row).replace(BLANK, "."))
        return "\n".join(lines)

    def print(self) -> None:
        print(self.render())


__all__ = ["Canvas"]
