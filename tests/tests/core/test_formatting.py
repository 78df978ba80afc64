#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from vcschema.core.errors import CyclicPropertyTreeError, DuplicateTypeIdError
from vcschema.core.formatting import format_error, format_error_loc, format_validation_errors
from vcschema.core.schema.property_node import PropertyNode


# --- format_error_loc --- #

@pytest.mark.parametrize("loc,expected", [
    (("properties", 1, "name"), "properties[1].name"),
    (("spec", "object", "properties", 0), "properties[0]"),
    (("spec", "object", "properties", 0, "spec", "string", "minLength"), "properties[0].minLength"),
    ((0, "name"), "[0].name"),
    ((), "<root>"),
])
def test_format_error_loc(loc, expected):
    assert format_error_loc(loc) == expected


# --- format_validation_errors --- #

def test_format_validation_errors_follow_authored_shape():
    payload = {
        "name": "addr",
        "type": "object",
        "properties": [{"name": 5, "type": "string"}],
    }
    with pytest.raises(ValidationError) as ei:
        PropertyNode.model_validate(payload)

    msgs = format_validation_errors(ei.value)
    assert len(msgs) == 1
    assert msgs[0].startswith("properties[0].name:")
    assert "must be a string" in msgs[0]


# --- format_error --- #

def test_format_error_compiler_errors_carry_class_name():
    msgs = format_error(CyclicPropertyTreeError(["addr", "addr"]))
    assert msgs == ["CyclicPropertyTreeError: Property tree contains a cycle at 'addr/addr'"]


def test_format_error_duplicate_type_lists_both_term_sets():
    err = DuplicateTypeIdError("Place", {"city": "copa:city"}, {"zip": "copa:zip"})
    (msg,) = format_error(err)
    assert msg.startswith("DuplicateTypeIdError: Type 'Place'")
    assert "['city']" in msg and "['zip']" in msg


def test_format_error_other_exceptions_keep_first_line():
    assert format_error(ValueError("first line\nsecond line")) == ["first line"]
    assert format_error(ValueError()) == ["ValueError"]
