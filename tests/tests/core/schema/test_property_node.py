#!/usr/bin/env python3
import logging

import pytest
from pydantic import ValidationError

from vcschema.core.schema.property_node import PropertyNode, spec_keys
from vcschema.core.schema.property_specs import ArraySpec, ObjectSpec, StringSpec
from vcschema.core.schema.property_type import PropertyType


# --- Flat authoring -> spec packing --- #

def test_flat_string_keys_are_packed_into_spec():
    n = PropertyNode.model_validate({
        "name": "postalCode",
        "type": "string",
        "minLength": 6,
        "pattern": "^[A-Z]",
    })
    assert isinstance(n.spec, StringSpec)
    assert n.spec.min_length == 6
    assert n.spec.pattern == "^[A-Z]"


def test_type_defaults_to_string():
    n = PropertyNode(name="x")
    assert n.type is PropertyType.STRING
    assert isinstance(n.spec, StringSpec)


def test_keys_of_other_types_are_dropped(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="vcschema"):
        n = PropertyNode.model_validate({
            "name": "age",
            "type": "integer",
            "minimum": 0,
            "minLength": 3,
            "enum": ["a"],
        })
    assert n.constraints() == {"minimum": 0}
    assert "Ignoring keys ['enum', 'minLength']" in caplog.text


def test_flat_keys_and_spec_together_rejected():
    with pytest.raises(ValidationError, match="either flat type-specific keys or 'spec'"):
        PropertyNode.model_validate({
            "name": "x",
            "type": "string",
            "minLength": 1,
            "spec": {"kind": "string"},
        })


def test_explicit_spec_kind_must_match_type():
    with pytest.raises(ValidationError):
        PropertyNode.model_validate({"name": "x", "type": "integer", "spec": {"kind": "string"}})


def test_unknown_type_rejected():
    with pytest.raises(ValidationError, match="Unknown property type"):
        PropertyNode.model_validate({"name": "x", "type": "date"})


# --- Name handling --- #

def test_missing_name_becomes_empty_and_not_emitted():
    n = PropertyNode.model_validate({"type": "string", "name": None})
    assert n.name == ""
    assert not n.is_emitted


@pytest.mark.parametrize("bad", [5, ["a"], {"a": 1}])
def test_non_string_name_rejected(bad):
    with pytest.raises(ValidationError, match="must be a string"):
        PropertyNode.model_validate({"name": bad})


def test_blank_title_and_description_are_absent():
    n = PropertyNode(name="x", title="", description="")
    assert n.title is None and n.description is None


# --- JSON-LD extension --- #

def test_json_ld_extension_aliases():
    n = PropertyNode.model_validate({
        "name": "addr",
        "jsonLd": {"vocabTermId": "address", "complexTypeId": "Place", "customId": ""},
    })
    assert n.json_ld.vocab_term_id == "address"
    assert n.json_ld.complex_type_id == "Place"
    assert n.json_ld.custom_id is None


def test_empty_json_ld_extension_is_absent():
    n = PropertyNode.model_validate({"name": "x", "jsonLd": {"vocabTermId": "  "}})
    assert n.json_ld is None


# --- Tree access --- #

def test_object_children_and_nested_properties():
    n = PropertyNode.model_validate({
        "name": "addr",
        "type": "object",
        "properties": [{"name": "city"}, {"name": "zip"}],
    })
    assert isinstance(n.spec, ObjectSpec)
    assert [c.name for c in n.children] == ["city", "zip"]
    assert [c.name for c in n.nested_properties] == ["city", "zip"]
    assert n.items is None


def test_array_of_objects_exposes_item_properties():
    n = PropertyNode.model_validate({
        "name": "owners",
        "type": "array",
        "items": {"type": "object", "properties": [{"name": "fullName"}]},
    })
    assert isinstance(n.spec, ArraySpec)
    assert n.properties == []
    assert [c.name for c in n.nested_properties] == ["fullName"]
    assert len(n.children) == 1


def test_scalar_array_and_empty_object_have_no_nested_properties():
    arr = PropertyNode.model_validate({"name": "tags", "type": "array", "items": {"type": "string"}})
    obj = PropertyNode.model_validate({"name": "meta", "type": "object"})
    assert arr.nested_properties == []
    assert obj.nested_properties == []


# --- constraints() --- #

def test_constraints_keep_zero_bounds():
    n = PropertyNode.model_validate({"name": "n", "type": "number", "minimum": 0, "maximum": 0})
    assert n.constraints() == {"minimum": 0, "maximum": 0}


def test_constraints_omit_empty_enum_and_false_unique_items():
    s = PropertyNode.model_validate({"name": "s", "enum": []})
    a = PropertyNode.model_validate({"name": "a", "type": "array", "uniqueItems": False, "minItems": 0})
    assert s.constraints() == {}
    assert a.constraints() == {"minItems": 0}


def test_constraints_use_json_schema_keywords():
    n = PropertyNode.model_validate({
        "name": "email",
        "format": "email",
        "maxLength": 100,
        "enum": ["a@b.c"],
    })
    assert n.constraints() == {"maxLength": 100, "format": "email", "enum": ["a@b.c"]}


def test_spec_keys_include_aliases_and_field_names():
    keys = spec_keys(PropertyType.STRING)
    assert {"minLength", "min_length", "format", "enum"} <= keys
    assert "kind" not in keys


# --- Serializer --- #

def test_dump_is_flat_camel_case():
    payload = {
        "id": "n1",
        "name": "addr",
        "type": "object",
        "required": True,
        "properties": [{"name": "city", "type": "string", "maxLength": 40}],
        "jsonLd": {"complexTypeId": "Place"},
    }
    n = PropertyNode.model_validate(payload)
    assert n.model_dump() == {
        "id": "n1",
        "name": "addr",
        "type": "object",
        "required": True,
        "properties": [{"name": "city", "type": "string", "required": False, "maxLength": 40}],
        "jsonLd": {"complexTypeId": "Place"},
    }


def test_dump_then_validate_is_stable():
    n = PropertyNode.model_validate({
        "name": "owners",
        "type": "array",
        "uniqueItems": True,
        "items": {"type": "object", "properties": [{"name": "fullName", "required": True}]},
    })
    again = PropertyNode.model_validate(n.model_dump())
    assert again == n


def test_nodes_are_frozen():
    n = PropertyNode(name="x")
    with pytest.raises(ValidationError):
        n.name = "y"
