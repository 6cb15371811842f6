"""
Stream transports - terminals, pipes and any file-like object with write()
"""
import sys
import threading
from typing import Optional, TextIO

from rich.console import Console

from fanlog.errors import WriteError
from .base import Transport


def supports_ansi(stream) -> bool:
    """Whether stream is a terminal that renders escape codes.

    Uses rich's detection, so FORCE_COLOR, TTY_COMPATIBLE and TERM=dumb
    are honored along with isatty().
    """
    console = Console(file=stream)
    return console.is_terminal and not console.is_dumb_terminal


class StreamTransport(Transport):
    """Writes to a text stream, one flushed write per call."""

    def __init__(self, stream: TextIO, name: str = "", interactive: Optional[bool] = None):
        self._stream = stream
        self.name = name or str(getattr(stream, "name", "") or type(stream).__name__)
        if interactive is None:
            interactive = supports_ansi(stream)
        self._interactive = bool(interactive)
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def is_interactive(self) -> bool:
        return self._interactive

    def write(self, data: str) -> None:
        with self._lock:
            try:
                stream = self.stream
                stream.write(data)
                stream.flush()
            except (OSError, ValueError) as e:
                raise WriteError(self.name, e) from e


class StandardStreamTransport(StreamTransport):
    """sys.stdout or sys.stderr, looked up at write time.

    Interactivity is decided against the stream installed at construction.
    """

    def __init__(self, stream_attr: str = "stdout", interactive: Optional[bool] = None):
        if stream_attr not in ("stdout", "stderr"):
            raise ValueError(f"stream_attr must be 'stdout' or 'stderr', got '{stream_attr}'")
        self._stream_attr = stream_attr
        super().__init__(getattr(sys, stream_attr), name=stream_attr, interactive=interactive)

    @property
    def stream(self) -> TextIO:
        return getattr(sys, self._stream_attr)


def stdout_transport(interactive: Optional[bool] = None) -> StandardStreamTransport:
    return StandardStreamTransport("stdout", interactive=interactive)


def stderr_transport(interactive: Optional[bool] = None) -> StandardStreamTransport:
    return StandardStreamTransport("stderr", interactive=interactive)
