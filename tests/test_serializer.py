"""Tests for nestedtext_core.serializer."""

import io

import pytest

from nestedtext_core import InvalidKey, VList, VObject, VString, dump, parse, stringify


# ---------------------------------------------------------------------------
# Canonical documents reproduce exactly
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text",
    [
        "",
        "> this is a\n> multiline\n> string",
        "- foo\n- bar",
        "foo: 1\nbar: False",
        "foo:\n  > multi\n  > line\nbar:",
        "a:\n  b:\n    - x\n    -\n      > y\n      > z\nc: 3",
    ],
)
def test_stringify_reproduces_canonical_text(text):
    assert stringify(parse(text).root) == text


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def test_top_level_single_line_string():
    assert stringify(VString("hello")) == "> hello"

def test_empty_string_inline():
    assert stringify(VObject({"k": VString("")})) == "k:"
    assert stringify(VList([VString("")])) == "-"

def test_inline_whitespace_kept():
    assert stringify(VObject({"k": VString("  x ")})) == "k:   x "

def test_trailing_newline_gets_empty_marker():
    assert stringify(VString("a\n")) == "> a\n>"

def test_empty_inner_line():
    assert stringify(VString("a\n\nb")) == "> a\n>\n> b"

def test_original_terminators_kept():
    assert stringify(VString("a\r\nb")) == "> a\r\n> b"

def test_multiline_in_list_indented():
    assert stringify(VList([VString("x\ny")]), indent=4) == "-\n    > x\n    > y"


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def test_custom_indent():
    value = VObject({"a": VObject({"b": VString("1")})})
    assert stringify(value, indent=3) == "a:\n   b: 1"

def test_empty_containers_render_nothing():
    assert stringify(VList([])) == ""
    assert stringify(VObject({"k": VList([])})) == "k:"

def test_list_of_lists():
    value = VList([VList([VString("a"), VString("b")]), VString("c")])
    assert stringify(value) == "-\n  - a\n  - b\n- c"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("key", ["has space", "#hash", "line\nbreak", "\ttab"])
def test_unwritable_keys(key):
    with pytest.raises(InvalidKey):
        stringify(VObject({key: VString("v")}))

def test_key_with_colons_is_fine():
    text = stringify(VObject({"a:b": VString("c"), "d:": VString("")}))
    assert text == "a:b: c\nd::"
    assert parse(text).root == VObject({"a:b": VString("c"), "d:": VString("")})

@pytest.mark.parametrize("indent", [0, -2, 1.5, True])
def test_bad_indent(indent):
    with pytest.raises(ValueError):
        stringify(VString("x"), indent=indent)

def test_not_a_value():
    with pytest.raises(TypeError):
        stringify({"a": "b"})


# ---------------------------------------------------------------------------
# dump
# ---------------------------------------------------------------------------

def test_dump_to_stream():
    dest = io.StringIO()
    dump(VObject({"a": VList([VString("1"), VString("2")])}), dest)
    assert dest.getvalue() == "a:\n  - 1\n  - 2"
