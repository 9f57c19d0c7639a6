"""Tests for the Reader layer."""

import pytest

from cda_core.errors import MissingRequiredAttribute, ResourceParseError, StructuralMismatch
from cda_core.model import Locale
from cda_core.reader import (
    as_array,
    as_object,
    optional_string,
    read_array,
    read_bool,
    read_locales,
    read_mapping,
    read_object,
    read_sequence,
    read_string,
    read_value,
    shape_of,
)


# ---------------------------------------------------------------------------
# shape_of
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "node, shape",
    [
        (None, "null"),
        (True, "boolean"),
        (3, "number"),
        (1.5, "number"),
        ("x", "string"),
        ({}, "object"),
        ([], "array"),
    ],
)
def test_shape_of(node, shape):
    assert shape_of(node) == shape


# ---------------------------------------------------------------------------
# Typed getters
# ---------------------------------------------------------------------------

def test_as_object_rejects_array():
    with pytest.raises(StructuralMismatch) as exc:
        as_object([1], "fields")
    assert exc.value.path == "fields"
    assert exc.value.expected == "object"
    assert exc.value.actual == "array"

def test_as_array_rejects_object():
    with pytest.raises(StructuralMismatch):
        as_array({"a": 1})

def test_read_object_nested_path():
    with pytest.raises(MissingRequiredAttribute) as exc:
        read_object({}, "sys", "sys.contentType")
    assert exc.value.path == "sys.contentType.sys"

def test_read_object_optional():
    assert read_object({}, "x", required=False) is None

def test_read_object_null_is_missing():
    with pytest.raises(MissingRequiredAttribute):
        read_object({"x": None}, "x")

def test_read_array():
    assert read_array({"xs": [1, 2]}, "xs") == [1, 2]

def test_read_string_wrong_shape():
    with pytest.raises(StructuralMismatch) as exc:
        read_string({"name": 5}, "name")
    assert exc.value.actual == "number"

def test_optional_string_absent_and_null():
    assert optional_string({}, "name") is None
    assert optional_string({"name": None}, "name") is None

def test_optional_string_scalars():
    assert optional_string({"n": "a"}, "n") == "a"
    assert optional_string({"n": 12}, "n") == "12"
    assert optional_string({"n": False}, "n") == "false"

def test_optional_string_container():
    with pytest.raises(StructuralMismatch):
        optional_string({"n": {"a": 1}}, "n")

def test_read_bool():
    assert read_bool({"default": True}, "default") is True
    assert read_bool({}, "default") is False
    with pytest.raises(StructuralMismatch):
        read_bool({"default": "yes"}, "default")


# ---------------------------------------------------------------------------
# Generic conversion
# ---------------------------------------------------------------------------

def test_read_value_copies_containers():
    node = {"a": [1, {"b": 2}], "c": "d"}
    out = read_value(node)
    assert out == node
    assert out is not node
    assert out["a"] is not node["a"]
    assert out["a"][1] is not node["a"][1]

def test_read_value_keeps_order():
    node = {"z": 1, "a": 2, "m": 3}
    assert list(read_value(node)) == ["z", "a", "m"]

def test_read_mapping_and_sequence_shapes():
    assert read_mapping({"a": 1}) == {"a": 1}
    assert read_sequence([1, 2]) == [1, 2]
    with pytest.raises(StructuralMismatch):
        read_mapping([], "fields")
    with pytest.raises(StructuralMismatch):
        read_sequence({}, "fields")

def test_read_locales():
    locales = read_locales(
        [{"code": "en-US", "name": "English", "default": True}, {"code": "de"}],
        "locales",
    )
    assert locales == [
        Locale(code="en-US", name="English", default=True),
        Locale(code="de", name=None, default=False),
    ]

def test_read_locales_missing_code():
    with pytest.raises(MissingRequiredAttribute) as exc:
        read_locales([{"code": "en-US"}, {"name": "German"}], "locales")
    assert exc.value.path == "locales[1].code"

def test_read_mapping_too_deep():
    node = {}
    for _ in range(5000):
        node = {"a": node}
    with pytest.raises(ResourceParseError) as exc:
        read_mapping(node, "fields")
    assert exc.value.path == "fields"
    assert isinstance(exc.value.__cause__, RecursionError)
