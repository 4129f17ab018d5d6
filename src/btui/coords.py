import math

from btui.dots import CELL_HEIGHT, CELL_WIDTH, PIXEL_MAP


def normalize(coord: float) -> int:
    """Round to the nearest integer, halves rounding up (0.5 -> 1, -0.5 -> 0)."""
    whole = math.floor(coord)
    # coord - whole is exact, coord + 0.5 is not
    return whole + 1 if coord - whole >= 0.5 else whole


def get_pos(x: float, y: float) -> tuple[int, int]:
    """Convert pixel coordinates to the (column, row) of the containing cell."""
    return normalize(x) // CELL_WIDTH, normalize(y) // CELL_HEIGHT


def pixel_mask(x: float, y: float) -> int | None:
    """Bit for pixel (x, y) within its cell, or None if it can't be addressed."""
    try:
        nx, ny = normalize(x), normalize(y)
    except (ValueError, OverflowError):
        # NaN and infinities have no cell
        return None
    return PIXEL_MAP[ny % CELL_HEIGHT][nx % CELL_WIDTH]
