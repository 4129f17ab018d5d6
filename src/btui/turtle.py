import math

from btui.canvas import Canvas
from btui.rasterizer import line


class Turtle:
    """Turtle graphics cursor drawing onto its own sparse canvas.

    Position is kept unrounded between moves and only snapped to pixels when
    a line is rasterized. Heading is in degrees and accumulates without
    wrapping, so it can go past 360 or below 0.
    """

    def __init__(self, x: float = 0, y: float = 0):
        self.canvas = Canvas()
        self.x = x
        self.y = y
        self.heading = 0.0
        self.pen_is_down = True

    def pen_up(self) -> None:
        self.pen_is_down = False

    def pen_down(self) -> None:
        self.pen_is_down = True

    def move_to(self, x: float, y: float) -> None:
        """Move to (x, y), drawing a line there if the pen is down."""
        if self.pen_is_down:
            for point in line(self.x, self.y, x, y):
                self.canvas.set(point.x, point.y)
        self.x = x
        self.y = y

    def forward(self, step: float) -> None:
        """Move `step` pixels along the heading.

        This always draws, even with the pen up; the pen state is restored
        afterwards so later `move_to` calls still respect it.
        """
        angle = math.radians(self.heading)
        x = self.x + math.cos(angle) * step
        y = self.y + math.sin(angle) * step
        was_down = self.pen_is_down
        self.pen_is_down = True
        self.move_to(x, y)
        self.pen_is_down = was_down

    def backward(self, step: float) -> None:
        self.forward(-step)

    def turn_right(self, angle: float) -> None:
        self.heading += angle

    def turn_left(self, angle: float) -> None:
        self.heading -= angle

    def frame(self) -> str:
        return self.canvas.frame()
