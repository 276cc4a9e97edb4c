"""Conversion between Value trees and the plain JSON data model."""

from __future__ import annotations

import json
from typing import Any

from .model import Value, VList, VObject, VString


def to_json(value: Value) -> Any:
    """Convert *value* to ``str`` / ``list`` / ``dict``.

    Scalars stay strings: ``VString("1")`` becomes ``"1"``, never ``1``.
    """
    if isinstance(value, VString):
        return value.value
    if isinstance(value, VList):
        return [to_json(item) for item in value.items]
    if isinstance(value, VObject):
        return {key: to_json(item) for key, item in value.entries.items()}
    raise TypeError(f"cannot convert {type(value).__name__} to JSON: {value!r}")


def from_json(data: Any) -> Value:
    """Convert decoded JSON data to a Value tree.

    Lossy by design: ``None`` → ``"null"``, booleans → ``"true"``/``"false"``,
    numbers → their text form.
    """
    if data is None:
        return VString("null")
    # bool before int: bool is an int subclass.
    if isinstance(data, bool):
        return VString("true" if data else "false")
    if isinstance(data, int):
        return VString(str(data))
    if isinstance(data, float):
        return VString(repr(data))
    if isinstance(data, str):
        return VString(data)
    if isinstance(data, (list, tuple)):
        return VList([from_json(item) for item in data])
    if isinstance(data, dict):
        return VObject({_key_text(key): from_json(item) for key, item in data.items()})
    raise TypeError(f"cannot convert {type(data).__name__} from JSON: {data!r}")


def _key_text(key: Any) -> str:
    # Mirrors json.dumps, which accepts these key types and writes them as text.
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return from_json(key).value
    raise TypeError(f"keys must be str, int, float, bool or None, not {type(key).__name__}")


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

def dumps(value: Value, **kwargs: Any) -> str:
    """Encode *value* as JSON text; *kwargs* go to :func:`json.dumps`."""
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(to_json(value), **kwargs)


def loads(text: str | bytes) -> Value:
    """Decode JSON text straight into a Value tree."""
    return from_json(json.loads(text))
