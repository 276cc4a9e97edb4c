"""Exception hierarchy for NestedText Core."""

from __future__ import annotations

from .line import Line


class NestedTextError(Exception):
    """Base class for every error raised by the engine.

    Carries the offending :class:`Line` when one is known so callers can
    report ``lineno`` / ``text`` for diagnostics.
    """

    def __init__(self, message: str, line: Line | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    @property
    def lineno(self) -> int | None:
        return self.line.lineno if self.line is not None else None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line.lineno}: {self.message}"


class UnrecognisedLine(NestedTextError):
    """A content line matches none of the string/list/object forms."""


class InvalidItem(NestedTextError):
    """A line's kind does not match the block it appears in."""


class InvalidIndentation(NestedTextError):
    """A line's depth is inconsistent with the enclosing blocks."""


class DuplicateKey(NestedTextError):
    def __init__(self, key: str, line: Line | None = None) -> None:
        super().__init__(f"duplicate key: {key!r}", line)
        self.key = key


class InvalidKey(NestedTextError):
    """A key that could not be read back if it were written out."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"cannot write key {key!r}: {reason}")
        self.key = key


class TreeReleasedError(NestedTextError):
    pass
