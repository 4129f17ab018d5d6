# Braille dot layout per character cell:
#
#   1 4
#   2 5
#   3 6
#   7 8
#
# Unicode braille patterns: U+2800 to U+28FF, one bit per dot.
BRAILLE_OFFSET = 0x2800

BLANK = " "

# Indexed as PIXEL_MAP[y % 4][x % 2]
PIXEL_MAP = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

# Bit for each dot number, DOT_MASKS[n - 1] for dot n
DOT_MASKS = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80)

CELL_WIDTH = 2
CELL_HEIGHT = 4


def glyph(mask: int) -> str:
    return chr(BRAILLE_OFFSET + mask)
