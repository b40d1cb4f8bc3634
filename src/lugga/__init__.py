"""Minimal colored console logger."""
from lugga.core.levels import LogLevel
from lugga.core.logging import Logger
from lugga.ui.colors import colorize

__all__ = ["Logger", "LogLevel", "colorize"]
__version__ = "1.0.0"
