"""
fanlog Logging - Internal diagnostics for the library and CLI.

Two loggers:
- logger: library diagnostics -> stderr, format: [FANLOG] LEVEL: message
- console: CLI reports -> stdout, no prefix

These are separate from fanlog.Logger, which writes user messages to transports.
"""
import logging
import sys


class _LazyStreamHandler(logging.StreamHandler):
    """StreamHandler that looks up sys.stdout/sys.stderr on every emit.

    Streams swapped in after setup (pytest capture, redirect_stdout) are
    picked up.
    """

    def __init__(self, stream_attr: str):
        super().__init__()
        self._stream_attr = stream_attr  # "stderr" or "stdout"

    @property
    def stream(self):
        return getattr(sys, self._stream_attr)

    @stream.setter
    def stream(self, value):
        pass


def _install(name: str, stream_attr: str, fmt: str) -> logging.Logger:
    log = logging.getLogger(name)
    if not log.handlers:
        handler = _LazyStreamHandler(stream_attr)
        handler.setFormatter(logging.Formatter(fmt))
        log.addHandler(handler)
        log.setLevel(logging.INFO)
        log.propagate = False
    return log


def get_logger(name: str = "fanlog") -> logging.Logger:
    """Get the diagnostics logger ([FANLOG] prefix, stderr)."""
    return _install(name, "stderr", "[FANLOG] %(levelname)s: %(message)s")


def get_console(name: str = "fanlog.console") -> logging.Logger:
    """Get the console logger for CLI output (stdout, bare messages)."""
    return _install(name, "stdout", "%(message)s")
