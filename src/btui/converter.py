import logging
from pathlib import Path

import numpy as np
from PIL import Image

from btui.dots import CELL_HEIGHT, CELL_WIDTH
from btui.fixed import FixedCanvas

logger = logging.getLogger(__name__)


def image_to_canvas(
    image: Image.Image | str | Path,
    width: int | None = None,
    threshold: int = 128,
    invert: bool = False,
) -> FixedCanvas:
    """Threshold an image into a braille canvas.

    A pixel is lit when it is darker than `threshold` (0-255), or lighter when
    `invert` is set. `width` is the output width in terminal columns; the
    image is resized to width * 2 pixels, keeping its aspect ratio.
    """
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    gray = image.convert("L")

    if width is not None:
        new_pixel_width = max(1, width * CELL_WIDTH)
        scale = new_pixel_width / gray.width
        new_pixel_height = max(1, int(gray.height * scale))
        logger.debug("Resizing %dx%d image to %dx%d", gray.width, gray.height, new_pixel_width, new_pixel_height)
        gray = gray.resize((new_pixel_width, new_pixel_height), Image.LANCZOS)

    arr = np.asarray(gray)
    pixels = arr > threshold if invert else arr < threshold
    return FixedCanvas.from_array(pixels)


def image_to_braille(
    image: Image.Image | str | Path,
    width: int | None = None,
    threshold: int = 128,
    invert: bool = False,
) -> str:
    canvas = image_to_canvas(image, width=width, threshold=threshold, invert=invert)
    if canvas.width < CELL_WIDTH or canvas.height < CELL_HEIGHT:
        return ""
    # Drop the delimiters framing the first and last rows
    return canvas.frame()[1:-1]
