"""
fanlog Render - Level-styled ANSI rendering for interactive transports, using rich
"""
import io
from typing import Dict, List

from rich.console import Console
from rich.text import Text

from fanlog.models import Level


LEVEL_STYLES: Dict[Level, str] = {
    Level.INFO: "bold cyan",
    Level.WARN: "bold yellow",
    Level.ERROR: "bold red",
    Level.DEBUG: "dim",
}

LEVEL_LABELS: Dict[Level, str] = {
    Level.INFO: "INFO",
    Level.WARN: "WARN",
    Level.ERROR: "ERROR",
    Level.DEBUG: "DEBUG",
}


class PrettyRenderer:
    """Turns a message into escape-coded lines: `[LEVEL] text`.

    The console renders into a private buffer and is forced into terminal
    mode, so output does not depend on where the process is attached.
    Message text is never parsed as markup and is never wrapped.
    """

    def __init__(self, color_system: str = "standard"):
        self.console = Console(
            file=io.StringIO(),
            force_terminal=True,
            color_system=color_system,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    def _badge(self, level: Level) -> Text:
        label = LEVEL_LABELS.get(level, str(level).upper())
        return Text(f"[{label}]", style=LEVEL_STYLES.get(level, ""))

    def _capture(self, text: Text) -> str:
        with self.console.capture() as capture:
            self.console.print(text, end="")
        return capture.get()

    def render(self, level: Level, message: str) -> List[str]:
        """
        Render message at level as one or more terminal lines

        Args:
            level: Severity used to pick the badge and its style
            message: Raw message text; embedded newlines start new lines

        Returns:
            Lines without trailing newlines
        """
        badge = self._badge(level)
        indent = " " * len(badge.plain)
        lines = []
        for i, part in enumerate(message.splitlines() or [""]):
            text = badge.copy() if i == 0 else Text(indent)
            text.append(" ")
            text.append(part)
            lines.append(self._capture(text))
        return lines
