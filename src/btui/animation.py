from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from btui.surface import Surface

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[H\x1b[J"

FrameSource = Callable[[], Iterable[Iterable[tuple[float, float]]]]


@dataclass
class AnimateOptions:
    delay: float = 1000 / 24  # milliseconds between frames
    cancel: asyncio.Event | None = None
    stream: TextIO | None = None


async def animate(surface: Surface, frames: FrameSource, options: AnimateOptions | None = None) -> int:
    """Draw each batch of points from `frames()` as one frame, clearing the surface in between.

    Cancellation is checked once per frame, before it is drawn. Returns the
    number of frames written.
    """
    options = options or AnimateOptions()
    stream = options.stream or sys.stdout
    count = 0

    logger.debug("Starting animation (delay=%.1fms)", options.delay)
    for points in frames():
        if options.cancel is not None and options.cancel.is_set():
            logger.debug("Animation cancelled after %d frames", count)
            break

        for x, y in points:
            surface.set(x, y)
        stream.write(f"{CLEAR_SCREEN}{surface.frame()}\n")
        stream.flush()
        count += 1

        if options.delay > 0:
            await asyncio.sleep(options.delay / 1000)
        surface.clear()
    else:
        logger.debug("Animation finished after %d frames", count)

    return count
