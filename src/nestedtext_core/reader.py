"""Reader layer: splits NestedText source into classified Line records."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .line import Line, LineKind


_TERMINATOR_RE = re.compile(r"\r\n|\r|\n")
# Key has no spaces; the separator is the first colon followed by " " or EOL.
_OBJECT_RE = re.compile(r"(?P<key>[^ ]*?):(?: (?P<value>.*))?", re.DOTALL)


# ---------------------------------------------------------------------------
# Physical lines
# ---------------------------------------------------------------------------

def iter_physical_lines(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(content, terminator)`` for each physical line of *text*.

    Only ``\\n``, ``\\r\\n`` and a bare ``\\r`` end a line. An unterminated
    last line is yielded with an empty terminator; a terminated one does not
    produce a trailing empty line.
    """
    pos = 0
    end = len(text)
    while pos < end:
        match = _TERMINATOR_RE.search(text, pos)
        if match is None:
            yield text[pos:], ""
            return
        yield text[pos:match.start()], match.group()
        pos = match.end()


# ---------------------------------------------------------------------------
# Marker recognition (all take the indentation-stripped text)
# ---------------------------------------------------------------------------

def match_string(stripped: str) -> str | None:
    """``>`` / ``> text`` → payload after the marker and one space."""
    if stripped == ">":
        return ""
    if stripped.startswith("> "):
        return stripped[2:]
    return None


def match_list(stripped: str) -> tuple[bool, str | None]:
    """``-`` / ``- text`` → (matched, inline value or None)."""
    if stripped == "-":
        return True, None
    if stripped.startswith("- "):
        return True, stripped[2:] or None
    return False, None


def match_object(stripped: str) -> tuple[str, str | None] | None:
    """``key:`` / ``key: value`` → (key, inline value or None)."""
    m = _OBJECT_RE.fullmatch(stripped)
    if m is None:
        return None
    return m.group("key"), m.group("value") or None


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_line(content: str, terminator: str, lineno: int) -> Line:
    """Classify one physical line (already split from its terminator)."""
    stripped = content.lstrip(" \t")
    depth = len(content) - len(stripped)

    if not stripped:
        return Line(content, lineno, LineKind.Blank, terminator=terminator)
    if stripped.startswith("#"):
        return Line(content, lineno, LineKind.Comment, terminator=terminator)

    def make(kind: LineKind, key: str | None = None, value: str | None = None) -> Line:
        return Line(content, lineno, kind, depth, key, value, terminator)

    if "\t" in content[:depth]:
        return make(LineKind.Unrecognised)

    string_value = match_string(stripped)
    if string_value is not None:
        return make(LineKind.String, value=string_value)

    is_list, list_value = match_list(stripped)
    if is_list:
        return make(LineKind.List, value=list_value)

    key_value = match_object(stripped)
    if key_value is not None:
        key, value = key_value
        return make(LineKind.Object, key=key, value=value)

    return make(LineKind.Unrecognised)


def read_lines(text: str) -> list[Line]:
    """Split *text* into classified lines. Never raises for malformed input."""
    return [
        classify_line(content, terminator, lineno)
        for lineno, (content, terminator) in enumerate(iter_physical_lines(text), 1)
    ]
