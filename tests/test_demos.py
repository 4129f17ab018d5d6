import itertools

import pytest

from btui import demos
from btui.fixed import FixedCanvas


@pytest.mark.parametrize("name", ["sine", "turtle", "polygon", "icons", "spinners", "kitchen-sink"])
def test_static_demos_write_output(name, stream):
    demos.DEMOS[name](stream)
    assert stream.getvalue().strip()


def test_speed_reports_every_size(stream):
    demos.speed(stream, frames=2)
    lines = stream.getvalue().splitlines()
    assert [line.split("\t")[0] for line in lines] == [f"{x}x{y}" for x, y in demos.SPEED_SIZES]
    assert all(line.endswith("s") for line in lines)


def test_kitchen_sink_reports_pixel_state(stream):
    demos.kitchen_sink(stream)
    out = stream.getvalue()
    assert "Hello btui!" in out
    assert "Pixel (0,0) is set: True" in out
    assert "Pixel (8,5) is set (hole): False" in out
    assert "Pixel (40,0) set (unset part): False" in out


def test_spinner_icons_are_single_glyph_pairs(stream):
    demos.spinners(stream)
    assert "\u2860\u280a" in stream.getvalue()


@pytest.mark.parametrize("name", sorted(demos.ANIMATIONS))
def test_animation_frames_fit_their_canvas(name):
    make_canvas, source = demos.ANIMATIONS[name]
    canvas = make_canvas()
    assert isinstance(canvas, FixedCanvas)
    for points in itertools.islice(source(), 3):
        assert points
        for x, y in points:
            assert 0 <= x < canvas.width
            assert 0 <= y < canvas.height


def test_wave_sweep_stays_on_canvas():
    canvas = FixedCanvas(180, 80)
    for points in itertools.islice(demos.wave_frames(), 180):
        line_end = points[0]
        assert line_end == (0, 40)
        for x, y in points:
            assert 0 <= x < canvas.width
            assert 0 <= y < canvas.height


def test_cube_perspective_frames():
    frame = next(demos.cube_frames(perspective=True))
    assert len(frame) > 0


def test_cube_rotates():
    frames = demos.cube_frames()
    assert next(frames) != next(frames)
