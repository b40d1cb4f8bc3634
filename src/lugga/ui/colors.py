from __future__ import annotations
import os
from typing import Any, Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

from lugga.core.levels import LogLevel

just_fix_windows_console()

COLORS = {
    LogLevel.LOG.value: Fore.WHITE,
    LogLevel.INFO.value: Fore.BLUE,
    LogLevel.WARN.value: Fore.YELLOW,
    LogLevel.ERROR.value: Fore.RED,
    LogLevel.DEBUG.value: Fore.CYAN,
}

def colorize(level: Any, text: str) -> str:
    """Wrap text in the color codes for level; unknown levels pass through."""
    if not isinstance(level, str):
        return text
    color = COLORS.get(str(level))
    if color is None:
        return text
    return f"{color}{text}{Style.RESET_ALL}"

def color_enabled(stream: TextIO, color: Optional[bool] = None) -> bool:
    """Decide whether output to stream gets styled.

    An explicit True/False wins. Otherwise NO_COLOR (any non-empty value)
    turns styling off, and it stays on only for terminals.
    """
    if color is not None:
        return color
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:  # closed stream
        return False
