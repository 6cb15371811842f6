"""
fanlog Models - Levels and per-call rendered output
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Level(str, Enum):
    """Severity of a log message. Levels carry no ordering."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"

    @classmethod
    def parse(cls, name: str) -> "Level":
        """Look up a level by name ("info", "WARN", "err", ...)"""
        key = name.strip().lower()
        if key == "err":
            key = "error"
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown level '{name}'. Available: {available}")


@dataclass
class RenderedLine:
    """Rendered forms of a single message, held only for one log call"""
    pretty_output: Optional[List[str]] = None  # lines for interactive transports
    file_output: Optional[str] = None  # raw text for plain transports
    released: bool = False

    def release(self) -> None:
        if self.released:
            return
        self.pretty_output = None
        self.file_output = None
        self.released = True

    def __enter__(self) -> "RenderedLine":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
