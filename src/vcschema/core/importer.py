#!/usr/bin/env python3
"""
Purpose:
    Imports a credential JSON Schema (the shape produced by the JSON Schema
    compiler branch) back into a SchemaProject, so published schemas can be
    edited and recompiled.
"""
from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from vcschema.core.constants import CREDENTIAL_SUBJECT_KEY, DEFAULT_TEXT_ENCODING, GOVERNANCE_DOC_KEY
from vcschema.core.schema.project import SchemaProject
from vcschema.core.schema.property_node import spec_keys
from vcschema.core.schema.property_type import PropertyType, SchemaMode

logger = logging.getLogger(__name__)


def import_json_schema(schema: Union[str, Mapping[str, Any]], *, name: str = "Imported") -> SchemaProject:
    """
    Parse a JSON Schema document into a SchemaProject.

    - `$id`, `title`, `description` and `x-governance-doc` populate metadata;
      the mode is reset to `json-schema`.
    - `properties.credentialSubject` becomes the root property list, keeping
      declaration order and the `required` sets at every level.

    Raises:
        ValueError: if the input is not a JSON object.
    """
    data = _load(schema)

    metadata = {
        "schemaId": data.get("$id") or "",
        "title": data.get("title") or "",
        "description": data.get("description") or "",
        "governanceDocUrl": data.get(GOVERNANCE_DOC_KEY),
        "mode": SchemaMode.JSON_SCHEMA.value,
    }

    subject = (data.get("properties") or {}).get(CREDENTIAL_SUBJECT_KEY) or {}
    properties = _parse_properties(subject, parent_path="")

    return SchemaProject.model_validate({"name": name, "metadata": metadata, "properties": properties})


def import_json_schema_file(path: Union[str, Path], *, name: Optional[str] = None) -> SchemaProject:
    """Read a JSON Schema file and import it (project name defaults to the file stem)."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"The file {str(p)!r} does not exist")
    return import_json_schema(p.read_text(encoding=DEFAULT_TEXT_ENCODING), name=name or p.stem)


# --- Internals --- #

def _load(schema: Union[str, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(schema, str):
        try:
            schema = json.loads(schema)
        except json.JSONDecodeError as e:
            raise ValueError("Invalid JSON Schema") from e
    if not isinstance(schema, Mapping):
        raise ValueError("Invalid JSON Schema")
    return dict(schema)


def _node_id(path: str) -> str:
    """Stable 10-char id derived from the node's path in the tree."""
    return hashlib.sha256(path.encode(DEFAULT_TEXT_ENCODING)).hexdigest()[:10]


def _parse_properties(container: Mapping[str, Any], parent_path: str) -> List[Dict[str, Any]]:
    props = container.get("properties")
    if not isinstance(props, Mapping):
        return []
    required = set(container.get("required") or [])
    return [
        _parse_property(prop_name, prop, prop_name in required, parent_path)
        for prop_name, prop in props.items()
        if isinstance(prop, Mapping)
    ]


def _parse_type(raw: Any, path: str) -> PropertyType:
    try:
        return PropertyType.parse(raw)
    except ValueError:
        logger.debug("Unsupported type %r at %r; importing as string", raw, path)
        return PropertyType.STRING


def _parse_property(name: str, prop: Mapping[str, Any], required: bool, parent_path: str) -> Dict[str, Any]:
    path = f"{parent_path}/{name}" if parent_path and name else (name or parent_path)
    ft = _parse_type(prop.get("type"), path)

    node: Dict[str, Any] = {
        "id": _node_id(path),
        "name": name,
        "title": prop.get("title") or name or None,
        "description": prop.get("description"),
        "type": ft.value,
        "required": required,
    }

    scalar_keys = spec_keys(ft) - {"items", "properties"}
    for key, value in prop.items():
        if key in scalar_keys and value is not None:
            node[key] = value

    if ft == PropertyType.ARRAY and isinstance(prop.get("items"), Mapping):
        node["items"] = _parse_item(prop["items"], path)

    if ft == PropertyType.OBJECT:
        nested = _parse_properties(prop, parent_path=path)
        if nested:
            node["properties"] = nested

    return node


def _parse_item(item: Mapping[str, Any], array_path: str) -> Dict[str, Any]:
    """Array elements carry no key in JSON Schema, so item nodes stay unnamed."""
    return _parse_property("", item, False, f"{array_path}[]")
