from __future__ import annotations
import json
import sys
from datetime import date, datetime, timezone
from typing import Any, Optional, TextIO

from lugga.core.levels import LogLevel
from lugga.ui.colors import color_enabled, colorize


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def timestamp() -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2024-01-15T10:30:00.000Z"""
    now = utcnow().astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _json_default(value: Any):
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def render_arg(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)
    except Exception:
        # cycles, unsupported types, runaway nesting, broken __str__ or items()
        return f"<unserializable {type(value).__name__}>"


def render_message(args: tuple) -> str:
    return " ".join(render_arg(a) for a in args)


class Logger:
    """Console logger tagging each line with a timestamp, level and context.

    Example::

        log = Logger("Auth")
        log.info("user logged in")
        # 2024-01-15T10:30:00.000Z INFO [Auth] user logged in
    """

    def __init__(self, context: str, color: Optional[bool] = None, stream: Optional[TextIO] = None):
        self._context = context
        self._color = color
        self._stream = stream

    @property
    def context(self) -> str:
        return self._context

    def log(self, *args: Any) -> None:
        self._format_message(render_message(args), LogLevel.LOG)

    def debug(self, *args: Any) -> None:
        self._format_message(render_message(args), LogLevel.DEBUG)

    def info(self, *args: Any) -> None:
        self._format_message(render_message(args), LogLevel.INFO)

    def warn(self, *args: Any) -> None:
        self._format_message(render_message(args), LogLevel.WARN)

    def error(self, *args: Any) -> None:
        self._format_message(render_message(args), LogLevel.ERROR)

    def _format_message(self, message: str, level: LogLevel) -> None:
        parts = [timestamp(), level.upper()]
        if self._context:
            parts.append(f"[{self._context}]")
        parts.append(message)
        line = " ".join(parts)
        # resolved per call, stdout may be swapped after construction
        stream = self._stream if self._stream is not None else sys.stdout
        if color_enabled(stream, self._color):
            line = colorize(level, line)
        stream.write(line + "\n")
        stream.flush()

    def __repr__(self) -> str:
        return f"Logger(context={self._context!r})"
