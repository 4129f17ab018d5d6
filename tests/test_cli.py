import pytest
from PIL import Image

from btui.animation import CLEAR_SCREEN
from btui.cli import build_parser, main


def test_parser_lists_every_demo():
    parser = build_parser()
    names = ["sine", "turtle", "polygon", "icons", "spinners", "kitchen-sink", "speed", "clock", "wave", "cube", "image"]
    for name in names:
        assert parser.parse_args([name] if name != "image" else [name, "x.png"]).command == name


def test_static_demo(capsys):
    main(["turtle"])
    assert capsys.readouterr().out.strip()


def test_animation_stops_after_frames(capsys):
    main(["cube", "--frames", "2", "--delay", "0"])
    assert capsys.readouterr().out.count(CLEAR_SCREEN) == 2


def test_animation_perspective(capsys):
    main(["cube", "-p", "--frames", "1", "--delay", "0"])
    assert capsys.readouterr().out.count(CLEAR_SCREEN) == 1


def test_image(tmp_path, capsys):
    path = tmp_path / "black.png"
    Image.new("L", (40, 40), 0).save(path)
    main(["image", str(path), "-s", "4"])
    lines = capsys.readouterr().out.splitlines()
    assert lines
    assert all(line == "\u28ff" * 4 for line in lines)


def test_image_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["image", str(tmp_path / "missing.png")])
    assert exc.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_requires_command():
    with pytest.raises(SystemExit):
        main([])
