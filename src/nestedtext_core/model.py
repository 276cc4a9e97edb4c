"""Data model for NestedText values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VString:
    value: str  # may hold line terminators when read from a "> " block


@dataclass(slots=True)
class VList:
    items: list[Value]


@dataclass(slots=True)
class VObject:
    entries: dict[str, Value]


Value = Union[VString, VList, VObject]
