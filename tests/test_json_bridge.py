"""Tests for nestedtext_core.json_bridge."""

import json

import pytest

from nestedtext_core import VList, VObject, VString, dumps, from_json, loads, parse, to_json


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------

class TestToJson:
    def test_empty_document(self):
        assert json.dumps(to_json(parse("").root)) == '""'

    def test_multiline_string_escaped(self):
        root = parse(" > this is a\n > multiline\n > string").root
        assert json.dumps(to_json(root)) == '"this is a\\nmultiline\\nstring"'

    def test_list(self):
        root = parse(" - foo\n - bar").root
        assert json.dumps(to_json(root), separators=(",", ":")) == '["foo","bar"]'

    def test_object_order_and_no_coercion(self):
        root = parse(" foo: 1\n bar: False").root
        assert json.dumps(to_json(root), separators=(",", ":")) == '{"foo":"1","bar":"False"}'

    def test_nested(self):
        root = parse(" bar:\n   nest1: 1\n   nest2:\n     - a").root
        assert to_json(root) == {"bar": {"nest1": "1", "nest2": ["a"]}}

    def test_multiline_inside_object(self):
        root = parse(" foo:\n   > multi\n   > line").root
        assert dumps(root, separators=(",", ":")) == '{"foo":"multi\\nline"}'

    def test_multiline_inside_list(self):
        root = parse(" -\n   > multi\n   > line\n -").root
        assert dumps(root, separators=(",", ":")) == '["multi\\nline",""]'

    def test_rejects_foreign_values(self):
        with pytest.raises(TypeError):
            to_json(VList(["raw string"]))


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------

class TestFromJson:
    def test_null(self):
        assert from_json(None) == VString("null")

    def test_booleans(self):
        assert from_json(True) == VString("true")
        assert from_json(False) == VString("false")

    def test_int(self):
        assert from_json(-42) == VString("-42")

    def test_float(self):
        assert from_json(1.5) == VString("1.5")
        assert from_json(1e300) == VString("1e+300")

    def test_string_verbatim(self):
        assert from_json("  a\nb ") == VString("  a\nb ")

    def test_containers(self):
        value = from_json({"b": [1, None], "a": {"x": "y"}})
        assert value == VObject({
            "b": VList([VString("1"), VString("null")]),
            "a": VObject({"x": VString("y")}),
        })
        assert list(value.entries) == ["b", "a"]

    def test_tuple_as_list(self):
        assert from_json(("a",)) == VList([VString("a")])

    def test_non_string_keys(self):
        assert from_json({1: "a", None: "b"}) == VObject({"1": VString("a"), "null": VString("b")})

    def test_rejects_unknown_types(self):
        with pytest.raises(TypeError):
            from_json({"s": {1, 2}})


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

def test_loads_then_stringify():
    value = loads('{"name": "Joe", "tags": ["a", "b"], "age": 36, "ok": true}')
    assert to_json(value) == {"name": "Joe", "tags": ["a", "b"], "age": "36", "ok": "true"}

def test_dumps_keeps_unicode():
    assert dumps(VString("café")) == '"café"'
