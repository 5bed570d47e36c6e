"""In-place progress rendering on the terminal."""

import sys
from typing import TextIO

from .durations import format_duration


BAR_WIDTH = 20


def progress_bar(remaining: float, total: float, width: int = BAR_WIDTH) -> str:
    """
    Render a fixed-width bar that fills with '#' as the wait elapses.

    Args:
        remaining: Seconds left
        total: Seconds for the whole wait
        width: Number of cells inside the brackets

    Returns:
        str: e.g. "[#####---------------]"
    """
    if total <= 0:
        spaces = 0
    else:
        spaces = int(width * remaining / total)
    spaces = min(max(spaces, 0), width)
    return "[" + "#" * (width - spaces) + "-" * spaces + "]"


class ProgressPrinter:
    """Writes a progress line and returns the cursor to column 0.

    Each update overwrites the previous one because the line ends with a
    carriage return instead of a newline.
    """

    def __init__(self, total: float, show_bar: bool = True, stream: TextIO | None = None):
        self.total = total
        self.show_bar = show_bar
        self.stream = stream

    def _out(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the writes
        return self.stream if self.stream is not None else sys.stderr

    def render(self, remaining: float) -> str:
        """Build the line for the given remaining time (without the '\\r')."""
        time_str = format_duration(remaining)
        if self.show_bar:
            return f"  {progress_bar(remaining, self.total)} {time_str:>10}"
        return f"  time remaining: {time_str:>10}"

    def update(self, remaining: float) -> None:
        out = self._out()
        out.write(self.render(remaining) + "\r")
        out.flush()

    def finish(self) -> None:
        """Draw the zero-remaining line and move to a fresh line."""
        self.update(0)
        out = self._out()
        out.write("\n")
        out.flush()
