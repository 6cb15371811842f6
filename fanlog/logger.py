"""
fanlog Logger - Fan leveled messages out to every transport.

A Logger classifies its transports once, at construction:
- interactive transports (color terminals) get level-styled pretty lines
- plain transports (files, pipes) get the raw message text, unchanged

Each public level has two entry points:
- safe_info / safe_warn / safe_err / safe_debug raise AllocationError or WriteError
- info / warn / err / debug swallow those errors so logging never breaks control flow
"""
from typing import Optional, Sequence

from fanlog.errors import AllocationError, FanlogError
from fanlog.log import get_logger
from fanlog.models import Level, RenderedLine
from fanlog.render import PrettyRenderer
from fanlog.transports.base import Transport

_log = get_logger()


class Logger:
    """Multi-transport logger over a fixed set of transports"""

    def __init__(self, transports: Sequence[Transport], renderer: Optional[PrettyRenderer] = None):
        self.transports = tuple(transports)
        self.renderer = renderer or PrettyRenderer()
        self.has_interactive_transport = False
        self.has_plain_transport = False
        for transport in self.transports:
            if transport.is_interactive:
                self.has_interactive_transport = True
            else:
                self.has_plain_transport = True

    def make_line(self, level: Level, message: str) -> RenderedLine:
        """
        Build the renderings needed by this logger's transports

        Args:
            level: Message severity
            message: Message text

        Returns:
            RenderedLine with pretty_output set when an interactive transport
            exists and file_output set when a plain transport exists

        Raises:
            AllocationError: If a rendering could not be built
        """
        pretty_output = None
        file_output = None
        try:
            if self.has_interactive_transport:
                pretty_output = self.renderer.render(level, message)
            if self.has_plain_transport:
                file_output = str(message)
        except MemoryError as e:
            raise AllocationError(f"could not render {level.value} message: {e}") from e
        return RenderedLine(pretty_output=pretty_output, file_output=file_output)

    def log(self, level: Level, message: str) -> None:
        """Render message once and write it to every transport in order.

        The first failing write aborts the call; later transports are skipped.
        """
        with self.make_line(level, message) as line:
            for transport in self.transports:
                if transport.is_interactive:
                    for pretty_line in line.pretty_output:
                        transport.write(pretty_line)
                        transport.write("\n")
                else:
                    transport.write(line.file_output)

    def safe_info(self, message: str) -> None:
        self.log(Level.INFO, message)

    def safe_warn(self, message: str) -> None:
        self.log(Level.WARN, message)

    def safe_err(self, message: str) -> None:
        self.log(Level.ERROR, message)

    def safe_debug(self, message: str) -> None:
        self.log(Level.DEBUG, message)

    def _silently(self, safe_method, message: str) -> None:
        try:
            safe_method(message)
        except FanlogError as e:
            _log.debug(f"DROPPED | {safe_method.__name__} | {e}")

    def info(self, message: str) -> None:
        self._silently(self.safe_info, message)

    def warn(self, message: str) -> None:
        self._silently(self.safe_warn, message)

    def err(self, message: str) -> None:
        self._silently(self.safe_err, message)

    def debug(self, message: str) -> None:
        self._silently(self.safe_debug, message)

    def log_at(self, level_name: str, message: str, safe: bool = False) -> None:
        """
        Log through the entry point for a level given by name

        Args:
            level_name: "info", "warn", "error"/"err" or "debug"
            message: Message text
            safe: Use the failable entry point instead of the silent one

        Raises:
            ValueError: If level_name is unknown
            AllocationError, WriteError: Only when safe is True
        """
        level = Level.parse(level_name)
        method_name = _ENTRY_POINTS[level]
        if safe:
            method_name = f"safe_{method_name}"
        getattr(self, method_name)(message)


_ENTRY_POINTS = {
    Level.INFO: "info",
    Level.WARN: "warn",
    Level.ERROR: "err",
    Level.DEBUG: "debug",
}
