from __future__ import annotations

class LuggaError(Exception):
    """Base class for errors raised by lugga."""

class UnknownLevelError(LuggaError):
    def __init__(self, level: str):
        super().__init__(f"Unknown log level '{level}'")
        self.level = level
