import math
from collections.abc import Iterator
from typing import NamedTuple

from btui.coords import normalize


class Point(NamedTuple):
    x: int
    y: int


def line(x1: float, y1: float, x2: float, y2: float) -> Iterator[Point]:
    """Yield the pixels on the line from (x1, y1) to (x2, y2), endpoints included.

    Each axis is interpolated independently as round(i * diff / steps), so a
    line always has max(|dx|, |dy|) + 1 points. A zero-length line yields its
    single point.
    """
    try:
        nx1, ny1 = normalize(x1), normalize(y1)
        nx2, ny2 = normalize(x2), normalize(y2)
    except (ValueError, OverflowError):
        # NaN or infinite endpoints
        return

    x_diff = abs(nx2 - nx1)
    y_diff = abs(ny2 - ny1)
    x_dir = 1 if nx1 <= nx2 else -1
    y_dir = 1 if ny1 <= ny2 else -1

    steps = max(x_diff, y_diff)
    for i in range(steps + 1):
        px, py = nx1, ny1
        if x_diff:
            px += normalize(i * x_diff / steps) * x_dir
        if y_diff:
            py += normalize(i * y_diff / steps) * y_dir
        yield Point(px, py)


def polygon(center_x: float = 0, center_y: float = 0, sides: int = 4, radius: float = 4) -> Iterator[Point]:
    """Yield the outline of a regular polygon, one line per edge in vertex order.

    Vertices sit at n * 360 / sides degrees, (radius + 1) / 2 pixels from the
    center. Only the offset from the center is scaled, so the outline is
    centered on (center_x, center_y) whatever the radius. Points shared by
    adjacent edges are yielded once per edge.
    """
    if sides < 1:
        return
    degree = 360 / sides
    scale = (radius + 1) / 2

    def vertex(n: int) -> tuple[float, float]:
        angle = math.radians(n * degree)
        return center_x + math.cos(angle) * scale, center_y + math.sin(angle) * scale

    for n in range(sides):
        x1, y1 = vertex(n)
        x2, y2 = vertex(n + 1)
        yield from line(x1, y1, x2, y2)
