import io

import pytest
from colorama import Fore, Style

from lugga import LogLevel, colorize
from lugga.ui.colors import color_enabled


@pytest.mark.parametrize("level,color", [
    ("log", Fore.WHITE),
    ("info", Fore.BLUE),
    ("warn", Fore.YELLOW),
    ("error", Fore.RED),
    ("debug", Fore.CYAN),
])
def test_level_colors(level, color):
    assert colorize(level, "test message") == f"{color}test message{Style.RESET_ALL}"
    assert colorize(LogLevel(level), "test message") == colorize(level, "test message")


@pytest.mark.parametrize("level", ["unknown", "INFO", "", None, 3])
def test_unknown_level_is_identity(level):
    assert colorize(level, "test message") == "test message"


class Tty(io.StringIO):
    def isatty(self):
        return True


def test_explicit_policy_wins(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert color_enabled(io.StringIO(), True) is True
    assert color_enabled(Tty(), False) is False


def test_auto_follows_tty(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert color_enabled(Tty()) is True
    assert color_enabled(io.StringIO()) is False
    assert color_enabled(object()) is False


def test_no_color_env(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert color_enabled(Tty()) is False
    monkeypatch.setenv("NO_COLOR", "")
    assert color_enabled(Tty()) is True


def test_closed_stream_is_not_a_terminal(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    buf = io.StringIO()
    buf.close()
    assert color_enabled(buf) is False
