"""Example programs drawing with the braille canvases.

Static demos write one or more frames to a stream. Animated demos are frame
sources for `btui.animation.animate`: each yields one batch of points per
frame, forever.
"""

import logging
import math
import time
from collections.abc import Iterator
from datetime import datetime
from typing import TextIO

import numpy as np

from btui.canvas import Canvas, FrameBounds
from btui.coords import normalize
from btui.fixed import FixedCanvas
from btui.glyphs import braille, braille_dots, braille_grid, braille_icon
from btui.rasterizer import Point, line, polygon
from btui.turtle import Turtle

logger = logging.getLogger(__name__)


def _ansi(code: int):
    return lambda s: f"\033[{code}m{s}\033[0m"


bold = _ansi(1)
red = _ansi(31)
green = _ansi(32)
yellow = _ansi(33)
cyan = _ansi(36)
dim = _ansi(90)


def sine(stream: TextIO) -> None:
    c = Canvas()

    for x in range(1800):
        c.set(x / 10, math.sin(math.radians(x)) * 10)
    print(c.frame(), file=stream)
    c.clear()

    # Compact sine
    for x in range(0, 3600, 20):
        c.set(x / 20, 4 + math.sin(math.radians(x)) * 4)
    print(c.frame(), file=stream)
    c.clear()

    for x in range(0, 1800, 10):
        c.set(x / 10, 10 + math.sin(math.radians(x)) * 10)
        c.set(x / 10, 10 + math.cos(math.radians(x)) * 10)
    print(c.frame(), file=stream)
    c.clear()

    # Sine wave over a filled square and two toggled ones
    for x in range(0, 360, 4):
        c.set(x / 4, 30 + math.sin(math.radians(x)) * 30)
    for x in range(30):
        for y in range(30):
            c.set(x, y)
            c.toggle(x + 30, y + 30)
            c.toggle(x + 60, y)
    print(c.frame(), file=stream)


def turtle(stream: TextIO) -> None:
    """Spirograph of 36 rotated circles."""
    t = Turtle()
    for _ in range(36):
        t.turn_right(10)
        for _ in range(36):
            t.turn_right(10)
            t.forward(8)
    print(t.frame(), file=stream)


def polygons(stream: TextIO) -> None:
    c = Canvas()
    for i, sides in enumerate(range(3, 9)):
        for point in polygon(20 + i * 40, 20, sides, 30):
            c.set(point.x, point.y)
        c.set_text(8 + i * 40, 44, f"{sides} sides")
    print(c.frame(), file=stream)


def icons(stream: TextIO) -> None:
    rule = dim("-" * 50)

    def section(title: str) -> None:
        print(file=stream)
        print(bold(title), file=stream)
        print(rule, file=stream)

    section("braille(pattern)")
    print(f"  {braille([True] * 8)}  all dots on", file=stream)
    print(f"  {braille([True, True, True, False, False, False, True, False])}  left column", file=stream)
    print(f"  {braille([False, False, False, True, True, True, False, True])}  right column", file=stream)
    print(f"  {braille([True, False, False, True, False, False, True, True])}  corners", file=stream)

    section("braille_dots(*dots)")
    print(f"  {braille_dots(1, 4)}  top row", file=stream)
    print(f"  {braille_dots(2, 3, 5, 6)}  middle rows", file=stream)
    print(f"  {braille_dots(7, 8)}  bottom row", file=stream)

    section("braille_icon(*chars)")
    print(f"  {green(braille_icon([1, 2, 3, 7], [4, 5, 6, 8]))}  bars", file=stream)
    print(f"  {yellow(braille_icon([7], [3, 8], [2, 6]))}  rising", file=stream)
    print(f"  {cyan(braille_icon([7, 8], [2, 3, 5, 6, 7, 8], [1, 2, 3, 4, 5, 6, 7, 8]))}  signal", file=stream)

    section("braille_grid(pixels)")
    heart = braille_grid(
        [
            [0, 1, 0, 0, 1, 0],
            [1, 1, 1, 1, 1, 1],
            [0, 1, 1, 1, 1, 0],
            [0, 0, 1, 1, 0, 0],
        ]
    )
    diamond = braille_grid([[0, 1, 1, 0], [1, 0, 0, 1], [1, 0, 0, 1], [0, 1, 1, 0]])
    print(f"  {red(heart)}  heart", file=stream)
    print(f"  {diamond}  diamond", file=stream)


def _pixel_icon(pixels: list[tuple[int, int]]) -> str:
    c = Canvas()
    for x, y in pixels:
        c.set(x, y)
    return c.frame()


def spinners(stream: TextIO) -> None:
    """Status lines with small canvas-drawn icons next to coloured labels."""
    thin = _pixel_icon([(0, 3), (1, 2), (2, 1), (3, 0)])
    thick = _pixel_icon([(0, 3), (0, 2), (1, 2), (1, 1), (2, 1), (2, 0), (3, 0)])
    filled = _pixel_icon([(x, y) for x in range(4) for y in range(4) if (x, y) != (0, 0)])
    print(f"\n  {thin} {yellow('Connection issues')}", file=stream)
    print(f"\n  {thick} {green('Write')}", file=stream)
    print(f"\n  {filled} {cyan('Read')}\n", file=stream)


def kitchen_sink(stream: TextIO) -> None:
    """Every drawing feature in one run: pixels, text, lines, turtle, clipping, fixed canvas."""

    def section(title: str) -> None:
        print(f"\n{bold(title)}\n{dim('=' * 60)}\n", file=stream)

    section("set, unset, toggle, get")
    c = Canvas()
    for x in range(20):
        for y in range(12):
            c.set(x, y)
    for x in range(6, 14):
        for y in range(4, 8):
            c.unset(x, y)
    for x in range(24, 44):
        for y in range(12):
            if (x + y) % 2 == 0:
                c.toggle(x, y)
    print(c.frame(), file=stream)
    print(f"\nPixel (0,0) is set: {c.get(0, 0)}", file=stream)
    print(f"Pixel (8,5) is set (hole): {c.get(8, 5)}", file=stream)

    section("set_text mixed with braille")
    c.clear()
    c.set_text(0, 0, "Hello btui!")
    for x in range(90):
        c.set(x, 4 + normalize(math.sin(x * math.pi / 15) * 3))
    print(c.frame(), file=stream)

    section("line fan")
    c.clear()
    for angle in range(0, 180, 15):
        end_x = normalize(math.cos(math.radians(angle)) * 40)
        end_y = normalize(math.sin(math.radians(angle)) * 20)
        for point in line(0, 20, end_x, 20 + end_y):
            c.set(point.x, point.y)
    print(c.frame(), file=stream)

    section("polygon: triangle, pentagon, hexagon")
    c.clear()
    for i, sides in enumerate((3, 5, 6)):
        for point in polygon(20 + i * 30, 20, sides, 16):
            c.set(point.x, point.y)
    print(c.frame(), file=stream)

    section("turtle pen up and down, dashed line")
    t = Turtle()
    for i in range(20):
        if i % 2 == 0:
            t.pen_down()
        else:
            t.pen_up()
        t.move_to(t.x + 5, t.y)
    t.pen_down()
    t.turn_left(90)
    t.forward(10)
    t.turn_left(90)
    t.forward(50)
    print(t.frame(), file=stream)

    section("frame bounds")
    c.clear()
    for x in range(100):
        c.set(x, normalize(math.sin(x * math.pi / 20) * 10 + 10))
    print("Full:", file=stream)
    print(c.frame(), file=stream)
    print("\nClipped to x=[20..60], y=[0..20]:", file=stream)
    print(c.frame(FrameBounds(min_x=20, min_y=0, max_x=60, max_y=20)), file=stream)

    section("fixed canvas")
    fc = FixedCanvas(80, 32)
    for x in range(80):
        fc.set(x, 0)
        fc.set(x, 31)
    for y in range(32):
        fc.set(0, y)
        fc.set(79, y)
    for i in range(32):
        fc.set(normalize(i / 32 * 80), i)
        fc.set(80 - normalize(i / 32 * 80), i)
    print(fc.frame(), file=stream)

    for x in range(20, 60, 2):
        fc.toggle(x, 16)
    for x in range(30, 50):
        fc.unset(x, 0)
    print("After toggle + unset:", file=stream)
    print(fc.frame(), file=stream)
    print(f"Pixel (0,0) set: {fc.get(0, 0)}", file=stream)
    print(f"Pixel (40,0) set (unset part): {fc.get(40, 0)}", file=stream)

    fc.clear()
    fc.set(40, 16)
    print("Single dot after clear:", file=stream)
    print(fc.frame(), file=stream)


SPEED_SIZES = [(0, 0), (10, 10), (20, 20), (20, 40), (40, 20), (40, 40), (100, 100)]


def speed(stream: TextIO, frames: int = 10_000) -> None:
    """Time `frames` renders of canvases of increasing size."""
    logger.debug("Timing %d frames per size", frames)
    c = Canvas()
    for sx, sy in SPEED_SIZES:
        c.set(0, 0)
        for i in range(sy):
            c.set(sx, i)
        start = time.perf_counter()
        for _ in range(frames):
            c.frame()
        elapsed = time.perf_counter() - start
        print(f"{sx}x{sy}\t{elapsed:.3f}s", file=stream)
        c.clear()


def clock_frames() -> Iterator[list[Point]]:
    """Analog clock hands for a 160x160 fixed canvas, one frame per call of `next`."""
    center = 80

    def hand(fraction: float, length: float) -> Iterator[Point]:
        x = math.floor(math.sin(fraction * 2 * math.pi) * length + center)
        y = 2 * center - math.floor(math.cos(fraction * 2 * math.pi) * length + center)
        return line(center, center, x, y)

    while True:
        now = datetime.now()
        seconds = now.second / 60 + now.microsecond / 60_000_000
        yield [
            *hand((now.hour % 12) / 12, 30),
            *hand(now.minute / 60, 50),
            *hand(seconds, 75),
        ]


def wave_frames(width: int = 180, height: int = 80) -> Iterator[list[tuple[float, float]]]:
    """A sweeping line tracking a moving sine wave, kept inside a width x height canvas."""
    mid = (height - 1) / 2
    i = 0
    while True:
        end_y = normalize(math.sin(math.radians(i)) * mid + mid)
        points: list[tuple[float, float]] = list(line(0, mid, width - 1, end_y))
        for x in range(0, 360, 2):
            points.append((x / 360 * width, mid + math.sin(math.radians(x + i)) * mid))
        yield points
        i += 2


CUBE_VERTICES = np.array(
    [
        [-20, 20, -20],
        [20, 20, -20],
        [20, -20, -20],
        [-20, -20, -20],
        [-20, 20, 20],
        [20, 20, 20],
        [20, -20, 20],
        [-20, -20, 20],
    ],
    dtype=np.float64,
)
CUBE_FACES = [(0, 1, 2, 3), (1, 5, 6, 2), (5, 4, 7, 6), (4, 0, 3, 7), (0, 4, 5, 1), (3, 2, 6, 7)]
CUBE_OFFSET = 40


def _rotation(ax: float, ay: float, az: float) -> np.ndarray:
    """Rotation matrix applying X, then Y, then Z rotations (degrees)."""
    cx, sx = math.cos(math.radians(ax)), math.sin(math.radians(ax))
    cy, sy = math.cos(math.radians(ay)), math.sin(math.radians(ay))
    cz, sz = math.cos(math.radians(az)), math.sin(math.radians(az))
    rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rz @ ry @ rx


def _project(points: np.ndarray, fov: float = 50, distance: float = 50) -> np.ndarray:
    """Perspective projection centered on the origin, y axis flipped to screen space."""
    factor = fov / (distance + points[:, 2])
    projected = np.empty_like(points)
    projected[:, 0] = points[:, 0] * factor
    projected[:, 1] = -points[:, 1] * factor
    projected[:, 2] = 1
    return projected


def cube_frames(perspective: bool = False) -> Iterator[list[Point]]:
    """Wireframe cube spinning around all three axes, centered on an 80x80 canvas."""
    ax = ay = az = 0
    while True:
        transformed = CUBE_VERTICES @ _rotation(ax, ay, az).T
        if perspective:
            transformed = _project(transformed)
        transformed[:, :2] += CUBE_OFFSET

        points: list[Point] = []
        for face in CUBE_FACES:
            for i, start in enumerate(face):
                end = face[(i + 1) % len(face)]
                (x1, y1, _), (x2, y2, _) = transformed[start], transformed[end]
                points.extend(line(x1, y1, x2, y2))
        yield points
        ax += 2
        ay += 3
        az += 5


# name -> (canvas factory, frame source)
ANIMATIONS = {
    "clock": (lambda: FixedCanvas(160, 160), clock_frames),
    "wave": (lambda: FixedCanvas(180, 80), wave_frames),
    "cube": (lambda: FixedCanvas(2 * CUBE_OFFSET, 2 * CUBE_OFFSET), cube_frames),
}

DEMOS = {
    "sine": sine,
    "turtle": turtle,
    "polygon": polygons,
    "icons": icons,
    "spinners": spinners,
    "kitchen-sink": kitchen_sink,
    "speed": speed,
}
