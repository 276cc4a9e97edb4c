"""ValueTree — the result of parsing a NestedText document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import TreeReleasedError
from .model import Value
from .options import ParseOptions


@dataclass
class ValueTree:
    """Owns the root value of one parsed document.

    ``release()`` drops the whole tree at once; the tree can also be used as
    a context manager that releases on exit::

        with parse(text) as tree:
            data = tree.to_json()
    """

    _root: Value | None
    options: ParseOptions = field(default_factory=ParseOptions)
    # Set only when options.copy_strings is False.
    source: str | None = None

    @property
    def root(self) -> Value:
        if self._root is None:
            raise TreeReleasedError("value tree has been released")
        return self._root

    @property
    def released(self) -> bool:
        return self._root is None

    def release(self) -> None:
        self._root = None
        self.source = None

    def __enter__(self) -> ValueTree:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    # -- Convenience accessors ------------------------------------------

    def stringify(self, indent: int = 2) -> str:
        from .serializer import stringify
        return stringify(self.root, indent=indent)

    def to_json(self) -> Any:
        from .json_bridge import to_json
        return to_json(self.root)
