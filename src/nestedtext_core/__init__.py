"""NestedText Core — parser and serializer for the NestedText data format."""

import logging

from .builder import Parser, parse
from .errors import (
    DuplicateKey,
    InvalidIndentation,
    InvalidItem,
    InvalidKey,
    NestedTextError,
    TreeReleasedError,
    UnrecognisedLine,
)
from .json_bridge import dumps, from_json, loads, to_json
from .model import Value, VList, VObject, VString
from .options import DuplicateFieldBehavior, ParseOptions, StringifyOptions
from .serializer import dump, stringify
from .tree import ValueTree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "parse",
    "Parser",
    "stringify",
    "dump",
    "to_json",
    "from_json",
    "dumps",
    "loads",
    "Value",
    "VString",
    "VList",
    "VObject",
    "ValueTree",
    "ParseOptions",
    "StringifyOptions",
    "DuplicateFieldBehavior",
    "NestedTextError",
    "UnrecognisedLine",
    "InvalidItem",
    "InvalidIndentation",
    "DuplicateKey",
    "InvalidKey",
    "TreeReleasedError",
]
