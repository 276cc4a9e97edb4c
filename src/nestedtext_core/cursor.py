"""LinesCursor — forward-only view over the content lines of a document."""

from __future__ import annotations

from dataclasses import dataclass

from .line import Line


@dataclass
class LinesCursor:
    """Cursor over classified lines that hides blank and comment lines.

    Usage::

        cursor = LinesCursor(read_lines(text))
        cursor.peek()        # next content line, not consumed
        cursor.peek_depth()  # its depth, or None at end of input
        cursor.next()        # consume it
    """

    lines: list[Line]
    index: int = 0

    def __post_init__(self) -> None:
        self._skip_ignorable()

    def _skip_ignorable(self) -> None:
        while self.index < len(self.lines) and not self.lines[self.index].is_content:
            self.index += 1

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.lines)

    def peek(self) -> Line | None:
        if self.at_end:
            return None
        return self.lines[self.index]

    def peek_depth(self) -> int | None:
        line = self.peek()
        return line.depth if line is not None else None

    def next(self) -> Line | None:
        line = self.peek()
        if line is None:
            return None
        self.index += 1
        self._skip_ignorable()
        return line
