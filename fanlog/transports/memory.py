"""
Memory transport - keeps every write in a list
"""
from typing import List

from .base import Transport


class MemoryTransport(Transport):
    """Records writes in order; useful for capturing output."""

    def __init__(self, name: str = "memory", interactive: bool = False):
        self.name = name
        self._interactive = interactive
        self.writes: List[str] = []

    @property
    def is_interactive(self) -> bool:
        return self._interactive

    def write(self, data: str) -> None:
        self.writes.append(data)

    def getvalue(self) -> str:
        return "".join(self.writes)

    def clear(self) -> None:
        self.writes.clear()
