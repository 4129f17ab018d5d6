import math

import numpy as np
import pytest

from btui.fixed import FixedCanvas


def test_dimensions():
    c = FixedCanvas(160, 160)
    assert (c.width, c.height) == (160, 160)
    assert len(c.content) == 160 * 160 // 8
    assert c.content.dtype == np.uint8


def test_dimensions_round_down():
    c = FixedCanvas(161, 163)
    assert (c.width, c.height) == (160, 160)
    assert len(c.content) == 160 * 160 // 8


def test_set_and_get(fixed):
    assert fixed.get(0, 0) is False
    fixed.set(0, 0)
    assert fixed.get(0, 0) is True
    assert fixed.get(1, 0) is False


def test_set_writes_expected_byte(fixed):
    # 10 wide -> 5 cells per row; pixel (3, 5) is cell (1, 1)
    fixed.set(3, 5)
    assert fixed.content[1 + 5 * 1] == 0x10
    assert np.count_nonzero(fixed.content) == 1


def test_unset(fixed):
    fixed.set(0, 0)
    fixed.set(1, 0)
    fixed.unset(0, 0)
    assert fixed.get(0, 0) is False
    assert fixed.get(1, 0) is True


def test_toggle(fixed):
    fixed.toggle(0, 0)
    assert fixed.get(0, 0) is True
    fixed.toggle(0, 0)
    assert fixed.get(0, 0) is False


def test_fractional_coordinates_floor(fixed):
    fixed.set(1.9, 3.9)
    assert fixed.get(1, 3) is True
    assert fixed.content[0] == 0x80


@pytest.mark.parametrize("x, y", [(-1, 0), (100, 0), (0, -1), (0, 100), (10, 0), (0, 8), (-0.5, 0)])
def test_out_of_bounds_is_ignored(fixed, x, y):
    fixed.set(x, y)
    fixed.toggle(x, y)
    fixed.unset(x, y)
    assert fixed.get(x, y) is False
    assert not fixed.content.any()


def test_nan_is_ignored(fixed):
    fixed.set(math.nan, 0)
    assert fixed.get(math.nan, 0) is False
    assert not fixed.content.any()


def test_clear(fixed):
    fixed.set(0, 0)
    fixed.set(2, 4)
    fixed.clear()
    assert fixed.get(0, 0) is False
    assert fixed.get(2, 4) is False
    assert len(fixed.content) == 10


def test_frame_contains_glyph():
    c = FixedCanvas(4, 4)
    c.set(0, 0)
    assert c.frame() == "\n\u2801 \n"


def test_frame_rows_are_delimited():
    c = FixedCanvas(4, 8)
    c.set(0, 0)
    c.set(3, 7)
    assert c.frame("|") == "|\u2801 | \u2880|"


def test_frame_empty_canvas_is_blank():
    c = FixedCanvas(4, 4)
    assert c.frame() == "\n  \n"
    assert str(c) == c.frame()


def test_zero_size_canvas():
    c = FixedCanvas(1, 3)
    assert (c.width, c.height) == (0, 0)
    c.set(0, 0)
    assert c.frame() == "\n"


def test_from_array():
    pixels = np.zeros((8, 4), dtype=bool)
    pixels[0, 0] = True
    pixels[7, 3] = True
    c = FixedCanvas.from_array(pixels)
    assert (c.width, c.height) == (4, 8)
    assert c.get(0, 0) and c.get(3, 7)
    assert np.count_nonzero(c.content) == 2


def test_from_array_trims_partial_cells():
    pixels = np.ones((5, 3), dtype=bool)
    c = FixedCanvas.from_array(pixels)
    assert (c.width, c.height) == (2, 4)
    assert c.frame() == "\n\u28ff\n"


@pytest.mark.parametrize("width, height", [(math.inf, 8), (8, math.nan), (-math.inf, -8)])
def test_non_finite_size_is_empty(width, height):
    c = FixedCanvas(width, height)
    assert c.content.size == 0
    c.set(0, 0)
    assert c.get(0, 0) is False
    assert c.frame() == "\n"
