"""Build braille characters straight from dot patterns, without a canvas.

Dot numbering follows the braille standard:

    1 4
    2 5
    3 6
    7 8
"""

from collections.abc import Iterable, Sequence

from btui.dots import DOT_MASKS, PIXEL_MAP, glyph

MAX_ICON_CHARS = 3
MAX_GRID_ROWS = 4
MAX_GRID_COLS = 6


def _dots_mask(dots: Iterable[int]) -> int:
    mask = 0
    for dot in dots:
        if dot in range(1, len(DOT_MASKS) + 1):
            mask |= DOT_MASKS[int(dot) - 1]
    return mask


def braille(pattern: Sequence[bool]) -> str:
    """Build a character from on/off states for dots 1-8, in dot order."""
    mask = 0
    for on, bit in zip(pattern, DOT_MASKS):
        if on:
            mask |= bit
    return glyph(mask)


def braille_dots(*dots: int) -> str:
    """Build a character from the dot numbers that are on. Out of range dots are ignored."""
    return glyph(_dots_mask(dots))


def braille_icon(*chars: Sequence[int] | None) -> str:
    """Build a 1-3 character icon, one list of dot numbers per character.

    Returns an empty string for zero or more than three characters.

    Example:
        braille_icon([1, 2, 3, 7], [4, 5, 6, 8])  # "⡇⢸", left bar + right bar
    """
    if not chars or len(chars) > MAX_ICON_CHARS:
        return ""
    return "".join(glyph(_dots_mask(dots)) for dots in chars if dots is not None)


def braille_grid(pixels: Sequence[Sequence[int]]) -> str:
    """Build an icon from a grid of 0/1 pixels, every two columns making one character.

    The grid is clamped to 4 rows by 6 columns and short rows are padded
    with zeros.

        col:  0 1 | 2 3 | 4 5
        row0: 1 4 | 1 4 | 1 4
        row1: 2 5 | 2 5 | 2 5
        row2: 3 6 | 3 6 | 3 6
        row3: 7 8 | 7 8 | 7 8
    """
    height = min(len(pixels), MAX_GRID_ROWS)
    width = min(max((len(row) for row in pixels), default=0), MAX_GRID_COLS)
    masks = [0] * -(-width // 2)

    for y in range(height):
        row = pixels[y]
        for x in range(min(width, len(row))):
            if row[x]:
                masks[x // 2] |= PIXEL_MAP[y][x % 2]

    return "".join(glyph(mask) for mask in masks)
