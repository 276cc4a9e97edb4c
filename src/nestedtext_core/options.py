"""Parse and stringify options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DuplicateFieldBehavior(Enum):
    """What to do when an object repeats a key at the same level."""

    UseFirst = auto()
    UseLast = auto()
    Error = auto()


@dataclass(frozen=True)
class ParseOptions:
    duplicate_field_behavior: DuplicateFieldBehavior = DuplicateFieldBehavior.Error
    # False keeps the source text alive on the ValueTree alongside the payloads.
    copy_strings: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.duplicate_field_behavior, DuplicateFieldBehavior):
            raise TypeError(
                "duplicate_field_behavior must be a DuplicateFieldBehavior, "
                f"got {self.duplicate_field_behavior!r}"
            )


@dataclass(frozen=True)
class StringifyOptions:
    indent: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"indent must be an int, got {self.indent!r}")
        if self.indent < 1:
            raise ValueError(f"indent must be positive, got {self.indent}")
