#!/usr/bin/env python3
import pytest
from pydantic import BaseModel, ValidationError

from vcschema.core.schema.property_node import PropertyNode
from vcschema.core.schema.property_specs import (
    ArraySpec,
    BooleanSpec,
    IntegerSpec,
    NumberSpec,
    ObjectSpec,
    PropertySpec,
    StringSpec,
)
from vcschema.core.schema.property_type import StringFormat


# --- Helpers --- #
class Holder(BaseModel):
    spec: PropertySpec


# --- Discriminated union parsing for each 'kind' --- #

@pytest.mark.parametrize("payload,expected_cls", [
    ({"kind": "string"}, StringSpec),
    ({"kind": "integer", "minimum": 0}, IntegerSpec),
    ({"kind": "number", "maximum": 1.5}, NumberSpec),
    ({"kind": "boolean"}, BooleanSpec),
    ({"kind": "array", "items": {"type": "string"}}, ArraySpec),
    ({"kind": "object", "properties": [{"name": "x"}]}, ObjectSpec),
])
def test_property_spec_discriminated_union_parses(payload, expected_cls):
    obj = Holder.model_validate({"spec": payload}).spec
    assert isinstance(obj, expected_cls)


# --- StringSpec --- #

def test_string_spec_accepts_aliases_and_field_names():
    a = StringSpec(minLength=1, maxLength=5)
    b = StringSpec(min_length=1, max_length=5)
    assert a == b


def test_string_spec_empty_enum_is_absent():
    assert StringSpec(enum=[]).enum is None
    assert StringSpec(enum=["A"]).enum == ["A"]


def test_string_spec_blank_format_and_pattern_are_absent():
    s = StringSpec(format="  ", pattern="")
    assert s.format is None and s.pattern is None


def test_string_spec_format_is_a_fixed_tag():
    assert StringSpec(format="email").format is StringFormat.EMAIL
    with pytest.raises(ValidationError):
        StringSpec(format="postal-code")


def test_string_spec_negative_length_rejected():
    with pytest.raises(ValidationError):
        StringSpec(minLength=-1)


def test_spec_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        StringSpec(minimum=1)


# --- Numeric specs --- #

def test_bounds_keep_zero_and_numeric_type():
    i = IntegerSpec(minimum=0, exclusiveMaximum=10)
    assert i.minimum == 0 and i.exclusive_maximum == 10
    n = NumberSpec(minimum=0.5)
    assert n.minimum == 0.5


# --- ArraySpec / ObjectSpec --- #

def test_array_spec_items_is_a_property_node():
    a = ArraySpec(items={"type": "integer", "minimum": 1})
    assert isinstance(a.items, PropertyNode)
    assert a.unique_items is False


def test_object_spec_properties_keep_order():
    o = ObjectSpec(properties=[{"name": "b"}, {"name": "a"}])
    assert [p.name for p in o.properties] == ["b", "a"]


def test_specs_are_frozen():
    s = StringSpec()
    with pytest.raises(ValidationError):
        s.pattern = "x"
