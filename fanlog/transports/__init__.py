"""
fanlog Transports - Output destinations for the Logger.

Usage:
    from fanlog.transports import create_transport

    console = create_transport("stdout")
    logfile = create_transport("file", path="logs/app.log")

Supported transports:
    - stdout / stderr: process standard streams (interactive when on a color terminal)
    - file: a log file opened in append or truncate mode (always plain)
    - memory: in-process capture of every write
"""
from .base import Transport
from .stream import (
    StreamTransport,
    StandardStreamTransport,
    stdout_transport,
    stderr_transport,
    supports_ansi,
)
from .file import FileTransport
from .memory import MemoryTransport

TRANSPORTS = {
    "stdout": stdout_transport,
    "stderr": stderr_transport,
    "file": FileTransport,
    "memory": MemoryTransport,
}


def create_transport(kind: str, **kwargs) -> Transport:
    """
    Create a transport by kind.

    Args:
        kind: Transport kind (stdout, stderr, file, memory)
        **kwargs: Transport-specific options (path, mode, encoding, interactive)

    Returns:
        Transport instance; the caller owns it and closes it

    Raises:
        ValueError: If kind is unknown
    """
    kind_name = kind.lower().strip()
    if kind_name not in TRANSPORTS:
        available = ", ".join(sorted(TRANSPORTS.keys()))
        raise ValueError(f"Unknown transport '{kind_name}'. Available: {available}")
    return TRANSPORTS[kind_name](**kwargs)


def list_transports() -> list:
    """Return list of available transport kinds."""
    return sorted(TRANSPORTS.keys())


__all__ = [
    "Transport",
    "StreamTransport",
    "StandardStreamTransport",
    "FileTransport",
    "MemoryTransport",
    "stdout_transport",
    "stderr_transport",
    "supports_ansi",
    "create_transport",
    "list_transports",
]
