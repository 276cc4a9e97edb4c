"""Serializer: Value tree → canonical NestedText."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO

from .errors import InvalidKey
from .model import Value, VList, VObject, VString
from .options import StringifyOptions
from .reader import iter_physical_lines


def stringify(value: Value, indent: int = 2) -> str:
    """Render *value* as NestedText, indenting nested blocks by *indent*.

    The output has no trailing newline. Empty lists and objects have no
    spelling of their own and come out as empty strings when read back.
    """
    options = StringifyOptions(indent=indent)
    return "".join(_render(value, 0, options.indent, nested=False))


def dump(value: Value, dest: IO[str], indent: int = 2) -> None:
    """Write the rendering of *value* to the text stream *dest*."""
    options = StringifyOptions(indent=indent)
    for chunk in _render(value, 0, options.indent, nested=False):
        dest.write(chunk)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render(value: Value, indent: int, width: int, nested: bool) -> Iterator[str]:
    """Yield text chunks for *value*.

    *nested* is True when the caller has just written a ``-`` or ``key:``
    marker and the value continues on that same line.
    """
    prefix = " " * indent

    if isinstance(value, VString):
        text = value.value
        if not _is_multiline(text):
            if text and nested:
                yield " " + text
            elif text:
                yield f"{prefix}> {text}"
            return
        if nested:
            yield "\n"
        yield from _render_multiline(text, prefix)

    elif isinstance(value, VList):
        for i, item in enumerate(value.items):
            if nested or i:
                yield "\n"
            yield prefix + "-"
            yield from _render(item, indent + width, width, nested=True)

    elif isinstance(value, VObject):
        for i, (key, item) in enumerate(value.entries.items()):
            _check_key(key)
            if nested or i:
                yield "\n"
            yield f"{prefix}{key}:"
            yield from _render(item, indent + width, width, nested=True)

    else:
        raise TypeError(f"cannot stringify {type(value).__name__}: {value!r}")


def _render_multiline(text: str, prefix: str) -> Iterator[str]:
    for content, terminator in iter_physical_lines(text):
        if content:
            yield f"{prefix}> {content}{terminator}"
        else:
            yield f"{prefix}>{terminator}"
    # A final terminator needs an empty "> " line to survive the round trip.
    if text.endswith(("\n", "\r")):
        yield prefix + ">"


def _is_multiline(text: str) -> bool:
    return "\n" in text or "\r" in text


def _check_key(key: str) -> None:
    if not isinstance(key, str):
        raise InvalidKey(repr(key), "keys must be strings")
    if _is_multiline(key):
        raise InvalidKey(key, "contains a line break")
    if " " in key:
        raise InvalidKey(key, "contains a space")
    if key.startswith("#"):
        raise InvalidKey(key, "starts with '#'")
    if key.startswith("\t"):
        raise InvalidKey(key, "starts with a tab")
