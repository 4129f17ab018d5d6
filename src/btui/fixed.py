import math

import numpy as np

from btui.dots import BLANK, BRAILLE_OFFSET, CELL_HEIGHT, CELL_WIDTH, PIXEL_MAP


def _whole_cells(size: float, cell: int) -> int:
    if not math.isfinite(size) or size < cell:
        return 0
    return math.floor(size) // cell * cell


class FixedCanvas:
    """Bounded braille canvas backed by a flat uint8 buffer, one byte per cell.

    Width and height are rounded down to multiples of 2 and 4 so every byte
    covers a full 2x4 cell. Negative, NaN or infinite sizes give an empty
    canvas. Pixels outside the canvas are silently ignored.
    """

    def __init__(self, width: int, height: int):
        self.width = _whole_cells(width, CELL_WIDTH)
        self.height = _whole_cells(height, CELL_HEIGHT)
        self.content = np.zeros(self.width * self.height // 8, dtype=np.uint8)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "FixedCanvas":
        """Build a canvas from a (height, width) boolean array, trimmed to whole cells."""
        pixels = np.asarray(pixels, dtype=bool)
        canvas = cls(pixels.shape[1], pixels.shape[0])
        trimmed = pixels[: canvas.height, : canvas.width]
        cells = np.zeros((canvas.height // CELL_HEIGHT, canvas.width // CELL_WIDTH), dtype=np.uint8)
        for dy, row in enumerate(PIXEL_MAP):
            for dx, bit in enumerate(row):
                cells |= np.where(trimmed[dy::CELL_HEIGHT, dx::CELL_WIDTH], bit, 0).astype(np.uint8)
        canvas.content[:] = cells.ravel()
        return canvas

    def __str__(self) -> str:
        return self.frame()

    def _locate(self, x: float, y: float) -> tuple[int, int] | None:
        """Buffer offset and bit for pixel (x, y), or None when out of bounds."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        fx, fy = math.floor(x), math.floor(y)
        offset = fx // CELL_WIDTH + (self.width // CELL_WIDTH) * (fy // CELL_HEIGHT)
        return offset, PIXEL_MAP[fy % CELL_HEIGHT][fx % CELL_WIDTH]

    def clear(self) -> None:
        self.content.fill(0)

    def set(self, x: float, y: float) -> None:
        located = self._locate(x, y)
        if located is None:
            return
        offset, mask = located
        self.content[offset] |= mask

    def unset(self, x: float, y: float) -> None:
        located = self._locate(x, y)
        if located is None:
            return
        offset, mask = located
        self.content[offset] &= 0xFF ^ mask

    def toggle(self, x: float, y: float) -> None:
        located = self._locate(x, y)
        if located is None:
            return
        offset, mask = located
        self.content[offset] ^= mask

    def get(self, x: float, y: float) -> bool:
        located = self._locate(x, y)
        if located is None:
            return False
        offset, mask = located
        return bool(self.content[offset] & mask)

    def frame(self, delimiter: str = "\n") -> str:
        """Render the buffer, with the delimiter before every row and after the last one."""
        if self.content.size == 0:
            return delimiter
        codes = np.where(self.content > 0, self.content.astype(np.uint32) + BRAILLE_OFFSET, ord(BLANK))
        rows = codes.reshape(-1, self.width // CELL_WIDTH)
        lines = ["".join(map(chr, row.tolist())) for row in rows]
        return delimiter + delimiter.join(lines) + delimiter
