"""
fanlog errors - Failures raised by the logger and its collaborators
"""


class FanlogError(Exception):
    pass


class AllocationError(FanlogError):
    """A rendering of the message could not be built."""


class WriteError(FanlogError):
    """A transport rejected a write (broken pipe, disk full, closed handle)."""

    def __init__(self, transport: str, cause: BaseException):
        super().__init__(f"write to {transport} failed: {cause}")
        self.transport = transport
        self.cause = cause


class ConfigError(FanlogError):
    pass
