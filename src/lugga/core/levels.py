from __future__ import annotations
from enum import Enum

from lugga.core.errors import UnknownLevelError

class LogLevel(str, Enum):
    LOG = "log"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value

    @property
    def tag(self) -> str:
        return self.value.upper()

    @classmethod
    def parse(cls, name: str) -> "LogLevel":
        """Case-insensitive lookup by level name."""
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            raise UnknownLevelError(str(name)) from None
