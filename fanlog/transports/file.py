"""
File transport - acquires a log file and writes plain text to it
"""
import os
from typing import Optional

from .stream import StreamTransport


class FileTransport(StreamTransport):
    """Plain transport backed by a file it opens itself.

    Unlike the other transports this one owns its handle; close it (or use
    it as a context manager) once no Logger writes to it any more.
    """

    def __init__(
        self,
        path: str,
        mode: str = "a",
        encoding: str = "utf-8",
        interactive: Optional[bool] = False,
    ):
        if mode not in ("a", "w"):
            raise ValueError(f"mode must be 'a' or 'w', got '{mode}'")
        self.path = path
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        handle = open(path, mode, encoding=encoding)
        super().__init__(handle, name=path, interactive=interactive)

    @property
    def closed(self) -> bool:
        return self.stream.closed

    def close(self) -> None:
        if not self.stream.closed:
            self.stream.close()
