"""Line — intermediate representation produced by the Reader layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    Blank = auto()
    Comment = auto()
    String = auto()
    List = auto()
    Object = auto()
    Unrecognised = auto()


# Kinds the cursor never hands to the builder.
IGNORABLE = frozenset({LineKind.Blank, LineKind.Comment})


@dataclass(frozen=True, slots=True)
class Line:
    """One physical input line.

    ``depth`` is ``None`` for blank and comment lines. ``value`` is the
    inline payload (``None`` when a list/object line has nothing after its
    marker). ``terminator`` is the line ending exactly as found in the input.
    """

    text: str
    lineno: int
    kind: LineKind
    depth: int | None = None
    key: str | None = None
    value: str | None = None
    terminator: str = ""

    @property
    def is_content(self) -> bool:
        return self.kind not in IGNORABLE
