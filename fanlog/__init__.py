"""
fanlog - Multi-transport logger for terminals and files

Modules:
- logger: Logger with safe (raising) and silent entry points per level
- models: Level enum and RenderedLine
- render: rich-based pretty rendering for interactive transports
- transports: stdout/stderr, file and memory transports
- config: YAML configuration loader
- log: internal diagnostics logging
"""

from .models import Level, RenderedLine
from .errors import FanlogError, AllocationError, WriteError, ConfigError
from .render import PrettyRenderer
from .transports import (
    Transport,
    StreamTransport,
    FileTransport,
    MemoryTransport,
    create_transport,
    list_transports,
)
from .logger import Logger
from .config import ConfigLoader

__version__ = "0.3.0"

__all__ = [
    "Logger",
    "Level",
    "RenderedLine",
    "PrettyRenderer",
    "Transport",
    "StreamTransport",
    "FileTransport",
    "MemoryTransport",
    "create_transport",
    "list_transports",
    "ConfigLoader",
    "FanlogError",
    "AllocationError",
    "WriteError",
    "ConfigError",
]
