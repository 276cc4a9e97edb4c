"""Tree builder: recursive descent over classified lines → Value tree."""

from __future__ import annotations

import dataclasses
import logging

from .cursor import LinesCursor
from .errors import (
    DuplicateKey,
    InvalidIndentation,
    InvalidItem,
    UnrecognisedLine,
)
from .line import Line, LineKind
from .model import Value, VList, VObject, VString
from .options import DuplicateFieldBehavior, ParseOptions
from .reader import read_lines
from .tree import ValueTree

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

class Parser:
    """Reusable parser bound to one set of :class:`ParseOptions`."""

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()

    def parse(self, text: str | bytes) -> ValueTree:
        if isinstance(text, (bytes, bytearray, memoryview)):
            text = bytes(text).decode("utf-8")

        lines = read_lines(text)
        cursor = LinesCursor(lines)
        logger.debug("parsing %d physical lines", len(lines))

        if cursor.at_end:
            root: Value = VString("")
        else:
            root = read_value(cursor, self.options)
            leftover = cursor.peek()
            if leftover is not None:
                raise InvalidIndentation(
                    "line is indented less than the top-level value", leftover
                )

        logger.debug("parsed document with %s root", type(root).__name__)
        source = None if self.options.copy_strings else text
        return ValueTree(root, self.options, source)


def parse(text: str | bytes, options: ParseOptions | None = None, **overrides) -> ValueTree:
    """Parse NestedText *text* into a :class:`ValueTree`.

    Keyword arguments override fields of *options*, e.g.
    ``parse(text, duplicate_field_behavior=DuplicateFieldBehavior.UseLast)``.
    """
    options = options or ParseOptions()
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return Parser(options).parse(text)


# ---------------------------------------------------------------------------
# Recursive descent
# ---------------------------------------------------------------------------

def read_value(cursor: LinesCursor, options: ParseOptions) -> Value:
    """Read one value whose first line is the cursor's next line."""
    line = cursor.peek()
    assert line is not None, "read_value called at end of input"

    if line.kind is LineKind.String:
        return VString(read_string(cursor))
    if line.kind is LineKind.List:
        return VList(read_list(cursor, options))
    if line.kind is LineKind.Object:
        return VObject(read_object(cursor, options))
    raise _unrecognised(line)


def read_string(cursor: LinesCursor) -> str:
    depth = cursor.peek_depth()
    parts: list[str] = []

    while True:
        line = cursor.next()
        _check_sibling(line, depth, LineKind.String)
        if _block_ends(cursor, depth):
            parts.append(line.value)
            break
        parts.append(line.value + line.terminator)

    return "".join(parts)


def read_list(cursor: LinesCursor, options: ParseOptions) -> list[Value]:
    depth = cursor.peek_depth()
    items: list[Value] = []

    while True:
        line = cursor.next()
        _check_sibling(line, depth, LineKind.List)
        items.append(_read_entry_value(cursor, line, depth, options))
        if _block_ends(cursor, depth):
            break

    return items


def read_object(cursor: LinesCursor, options: ParseOptions) -> dict[str, Value]:
    depth = cursor.peek_depth()
    entries: dict[str, Value] = {}
    policy = options.duplicate_field_behavior

    while True:
        line = cursor.next()
        _check_sibling(line, depth, LineKind.Object)
        # Always read the value so the cursor stays aligned for the next key.
        value = _read_entry_value(cursor, line, depth, options)
        key = line.key

        if key not in entries:
            entries[key] = value
        elif policy is DuplicateFieldBehavior.Error:
            raise DuplicateKey(key, line)
        elif policy is DuplicateFieldBehavior.UseLast:
            logger.debug("line %d: duplicate key %r replaces earlier value", line.lineno, key)
            entries[key] = value
        else:
            logger.debug("line %d: duplicate key %r ignored", line.lineno, key)

        if _block_ends(cursor, depth):
            break

    return entries


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read_entry_value(
    cursor: LinesCursor,
    line: Line,
    depth: int,
    options: ParseOptions,
) -> Value:
    """Inline value, nested block, or the empty string, in that order."""
    if line.value is not None:
        return VString(line.value)
    next_depth = cursor.peek_depth()
    if next_depth is not None and next_depth > depth:
        return read_value(cursor, options)
    return VString("")


def _block_ends(cursor: LinesCursor, depth: int) -> bool:
    next_depth = cursor.peek_depth()
    return next_depth is None or next_depth < depth


def _check_sibling(line: Line | None, depth: int, kind: LineKind) -> None:
    assert line is not None
    if line.kind is LineKind.Unrecognised:
        raise _unrecognised(line)
    if line.depth > depth:
        raise InvalidIndentation(
            f"unexpected indentation (expected {depth}, found {line.depth})", line
        )
    if line.kind is not kind:
        raise InvalidItem(
            f"expected {kind.name.lower()} item, found {line.kind.name.lower()} item",
            line,
        )


def _unrecognised(line: Line) -> UnrecognisedLine:
    if "\t" in line.text[: line.depth]:
        return UnrecognisedLine("tab characters are not allowed in indentation", line)
    return UnrecognisedLine(f"unrecognised line: {line.text.strip()!r}", line)
