"""Line reader handed to block processors.

Wraps the lines the host has already tokenized for a matched block.
"""

from typing import Iterable, Optional


class Reader:
    """Sequential reader over a block's lines."""

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self._cursor = 0

    @property
    def lines(self) -> list[str]:
        """Unread lines, as a copy."""
        return self._lines[self._cursor:]

    def has_more_lines(self) -> bool:
        return self._cursor < len(self._lines)

    def read_line(self) -> Optional[str]:
        """Consume and return the next line, or None when exhausted."""
        if not self.has_more_lines():
            return None
        line = self._lines[self._cursor]
        self._cursor += 1
        return line

    def read_lines(self) -> list[str]:
        """Consume and return all remaining lines."""
        remaining = self.lines
        self._cursor = len(self._lines)
        return remaining
