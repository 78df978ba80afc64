#!/usr/bin/env python3
import json
from pathlib import Path

import pytest

from vcschema.core.compiler import compile_schema
from vcschema.core.importer import import_json_schema, import_json_schema_file
from vcschema.core.schema.property_type import PropertyType, SchemaMode


# --- Helpers --- #

PUBLISHED = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.org/home.schema.json",
    "title": "Home Credential",
    "description": "Proof of residence",
    "type": "object",
    "properties": {
        "credentialSubject": {
            "type": "object",
            "properties": {
                "address": {"title": "Address", "type": "string", "maxLength": 200},
                "addr": {
                    "title": "addr",
                    "type": "object",
                    "properties": {
                        "city": {"title": "city", "type": "string"},
                        "zip": {"title": "zip", "type": "string", "pattern": "^[0-9]{5}$"},
                    },
                    "required": ["zip"],
                },
                "owners": {
                    "title": "owners",
                    "type": "array",
                    "minItems": 1,
                    "items": {"type": "object", "properties": {"name": {"title": "name", "type": "string"}}},
                },
            },
            "required": ["address"],
        }
    },
    "x-governance-doc": "https://example.org/gov.pdf",
}


# --- import_json_schema --- #

def test_metadata_is_taken_from_envelope():
    project = import_json_schema(PUBLISHED)
    md = project.metadata
    assert project.name == "Imported"
    assert md.schema_id == "https://example.org/home.schema.json"
    assert md.title == "Home Credential"
    assert md.description == "Proof of residence"
    assert md.governance_doc_url == "https://example.org/gov.pdf"
    assert md.mode is SchemaMode.JSON_SCHEMA


def test_properties_keep_order_required_and_constraints():
    project = import_json_schema(json.dumps(PUBLISHED), name="Home")
    address, addr, owners = project.properties

    assert project.name == "Home"
    assert [address.name, addr.name, owners.name] == ["address", "addr", "owners"]
    assert address.required and not addr.required
    assert address.title == "Address"
    assert address.constraints() == {"maxLength": 200}

    assert [c.name for c in addr.properties] == ["city", "zip"]
    assert [c.required for c in addr.properties] == [False, True]

    assert owners.type is PropertyType.ARRAY
    assert owners.items.name == ""
    assert [c.name for c in owners.items.properties] == ["name"]


def test_node_ids_are_stable_and_distinct():
    first = import_json_schema(PUBLISHED)
    second = import_json_schema(PUBLISHED)
    ids = [n.id for n in first.iter_nodes()]
    assert ids == [n.id for n in second.iter_nodes()]
    assert len(set(ids)) == len(ids)
    assert all(len(i) == 10 for i in ids)


def test_import_then_compile_reproduces_the_schema():
    project = import_json_schema(PUBLISHED)
    assert compile_schema(project.metadata, project.properties) == PUBLISHED


def test_unknown_type_imported_as_string():
    schema = {"properties": {"credentialSubject": {"properties": {"x": {"type": "null"}}}}}
    (node,) = import_json_schema(schema).properties
    assert node.type is PropertyType.STRING


def test_schema_without_subject_has_no_properties():
    project = import_json_schema({"title": "Empty"})
    assert project.properties == []


@pytest.mark.parametrize("bad", ["{not json", "[1, 2]", 42])
def test_invalid_input_raises(bad):
    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        import_json_schema(bad)


# --- import_json_schema_file --- #

def test_import_file_uses_stem_as_name(tmp_path: Path):
    p = tmp_path / "home-credential.schema.json"
    p.write_text(json.dumps(PUBLISHED), encoding="utf-8")
    assert import_json_schema_file(p).name == "home-credential.schema"


def test_import_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        import_json_schema_file(tmp_path / "nope.json")
