import os
from types import SimpleNamespace

from btui import terminal
from btui.terminal import TerminalSize, get_terminal_size


def fake_stdout(monkeypatch, tty):
    monkeypatch.setattr(terminal, "sys", SimpleNamespace(stdout=SimpleNamespace(isatty=lambda: tty)))


def test_not_a_tty_falls_back(monkeypatch):
    fake_stdout(monkeypatch, tty=False)
    assert get_terminal_size() == TerminalSize(80, 25)


def test_reads_terminal_size(monkeypatch):
    fake_stdout(monkeypatch, tty=True)
    monkeypatch.setattr(terminal.os, "get_terminal_size", lambda: os.terminal_size((120, 40)))
    assert get_terminal_size() == TerminalSize(120, 40)


def test_query_failure_falls_back(monkeypatch):
    def fail():
        raise OSError("no terminal")

    fake_stdout(monkeypatch, tty=True)
    monkeypatch.setattr(terminal.os, "get_terminal_size", fail)
    size = get_terminal_size()
    assert (size.width, size.height) == (80, 25)
