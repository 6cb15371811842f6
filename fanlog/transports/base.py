"""
Base transport interface for log output.

The Logger only knows this interface: every destination answers whether it
renders escape codes and accepts text writes. Opening and closing the
underlying resource belongs to whoever built the transport.
"""
from abc import ABC, abstractmethod


class Transport(ABC):
    """Abstract base class for output destinations."""

    name: str = ""

    @property
    @abstractmethod
    def is_interactive(self) -> bool:
        """True when the destination renders ANSI escape codes (a color terminal)."""
        ...

    @abstractmethod
    def write(self, data: str) -> None:
        """
        Write data as-is.

        Raises:
            WriteError: the destination rejected the write
        """
        ...

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self) -> str:
        kind = "interactive" if self.is_interactive else "plain"
        return f"<{type(self).__name__} {self.name} {kind}>"
