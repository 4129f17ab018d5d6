from __future__ import annotations

import math
from dataclasses import dataclass

from btui.coords import get_pos, pixel_mask
from btui.dots import BLANK, CELL_HEIGHT, CELL_WIDTH, glyph


@dataclass(frozen=True)
class MaskCell:
    """Braille cell holding a bitmask of lit sub-pixels."""

    mask: int


@dataclass(frozen=True)
class TextCell:
    """Cell holding a literal character that overrides braille rendering."""

    char: str


Cell = MaskCell | TextCell


@dataclass
class FrameBounds:
    """Pixel bounds for rendering. Minimums are inclusive, maximums exclusive."""

    min_x: float | None = None
    min_y: float | None = None
    max_x: float | None = None
    max_y: float | None = None


class Canvas:
    """Unbounded braille canvas with sparse row -> column -> cell storage.

    Cells only exist while they hold a non-empty mask or a text character,
    and rows only while they hold cells, so storage grows with drawn content
    rather than with the area it spans.
    """

    def __init__(self, line_ending: str = "\n"):
        self.line_ending = line_ending
        self.chars: dict[int, dict[int, Cell]] = {}

    def __len__(self) -> int:
        return sum(len(row) for row in self.chars.values())

    def __bool__(self) -> bool:
        return bool(self.chars)

    def __str__(self) -> str:
        return self.frame()

    def clear(self) -> None:
        self.chars.clear()

    def set(self, x: float, y: float) -> None:
        mask = pixel_mask(x, y)
        if mask is None:
            return
        col, row = get_pos(x, y)
        row_map = self.chars.setdefault(row, {})
        cell = row_map.get(col)
        if isinstance(cell, TextCell):
            return
        current = cell.mask if cell is not None else 0
        row_map[col] = MaskCell(current | mask)

    def unset(self, x: float, y: float) -> None:
        mask = pixel_mask(x, y)
        if mask is None:
            return
        col, row = get_pos(x, y)
        row_map = self.chars.get(row)
        if row_map is None:
            return
        cell = row_map.get(col)
        if not isinstance(cell, MaskCell):
            return

        updated = cell.mask & ~mask
        if updated:
            row_map[col] = MaskCell(updated)
            return
        del row_map[col]
        if not row_map:
            del self.chars[row]

    def toggle(self, x: float, y: float) -> None:
        mask = pixel_mask(x, y)
        if mask is None:
            return
        col, row = get_pos(x, y)
        cell = self.chars.get(row, {}).get(col)
        # Text cells count as fully lit, so toggling them goes down the (no-op) unset path
        if isinstance(cell, TextCell) or (cell is not None and cell.mask & mask):
            self.unset(x, y)
        else:
            self.set(x, y)

    def get(self, x: float, y: float) -> bool:
        mask = pixel_mask(x, y)
        if mask is None:
            return False
        col, row = get_pos(x, y)
        cell = self.chars.get(row, {}).get(col)
        if cell is None:
            return False
        if isinstance(cell, TextCell):
            return True
        return bool(cell.mask & mask)

    def set_text(self, x: float, y: float, text: str) -> None:
        """Write text starting at the cell containing (x, y), one character per cell.

        The coordinates are floored directly rather than rounded like pixel
        coordinates, so fractional positions can land one cell lower than a
        pixel at the same point would.
        """
        if not text:
            return
        try:
            col = math.floor(x / CELL_WIDTH)
            row = math.floor(y / CELL_HEIGHT)
        except (ValueError, OverflowError):
            return
        row_map = self.chars.setdefault(row, {})
        for i, char in enumerate(text):
            row_map[col + i] = TextCell(char)

    def rows(self, bounds: FrameBounds | None = None) -> list[str]:
        """Render the canvas as one string per cell row."""
        if not self.chars:
            return []
        bounds = bounds or FrameBounds()

        if bounds.min_y is not None:
            min_row = math.floor(bounds.min_y / CELL_HEIGHT)
        else:
            min_row = min(self.chars)
        if bounds.max_y is not None:
            max_row = math.floor((bounds.max_y - 1) / CELL_HEIGHT)
        else:
            max_row = max(self.chars)

        # Left edge is shared by every row so columns line up
        if bounds.min_x is not None:
            min_col = math.floor(bounds.min_x / CELL_WIDTH)
        else:
            min_col = min(min(row_map) for row_map in self.chars.values())

        lines = []
        for row in range(min_row, max_row + 1):
            row_map = self.chars.get(row)
            if not row_map:
                lines.append("")
                continue
            if bounds.max_x is not None:
                max_col = math.floor((bounds.max_x - 1) / CELL_WIDTH)
            else:
                max_col = max(row_map)
            lines.append("".join(_render_cell(row_map.get(col)) for col in range(min_col, max_col + 1)))
        return lines

    def frame(self, bounds: FrameBounds | None = None) -> str:
        """Render the canvas as a single string joined by the line ending."""
        return self.line_ending.join(self.rows(bounds))


def _render_cell(cell: Cell | None) -> str:
    if isinstance(cell, TextCell):
        return cell.char
    if cell is None or not cell.mask:
        return BLANK
    return glyph(cell.mask)
