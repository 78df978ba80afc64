#!/usr/bin/env python3
"""
Purpose:
    Entry points of the schema compiler. `compile_schema` dispatches on
    `metadata.mode` to the JSON Schema or JSON-LD context branch. Both are
    pure: inputs are never mutated and each call returns a fresh dict.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import TypeAdapter

from vcschema.core.constants import DEFAULT_JSON_INDENT
from vcschema.core.errors import UnsupportedModeError
from vcschema.core.compiler.settings import CompilerSettings, DEFAULT_SETTINGS
from vcschema.core.compiler.json_schema import to_json_schema
from vcschema.core.compiler.jsonld_context import to_jsonld_context
from vcschema.core.schema.metadata import SchemaMetadata
from vcschema.core.schema.project import SchemaProject
from vcschema.core.schema.property_node import PropertyNode
from vcschema.core.schema.property_type import SchemaMode

_NODES_ADAPTER = TypeAdapter(List[PropertyNode])

MetadataInput = Union[SchemaMetadata, Mapping[str, Any]]
PropertiesInput = Sequence[Union[PropertyNode, Mapping[str, Any]]]


def compile_schema(
    metadata: MetadataInput,
    properties: PropertiesInput,
    settings: Optional[CompilerSettings] = None,
) -> Dict[str, Any]:
    """
    Compile a property tree into the document selected by `metadata.mode`.

    Raw mappings (the camelCase shape the schema builder stores) are validated
    into models first.

    Raises:
        ValidationError: if raw input does not validate.
        SchemaCompilerError: for unrepresentable trees (cycles, conflicting types).
    """
    md = _coerce_metadata(metadata)
    nodes = _coerce_nodes(properties)
    settings = settings or DEFAULT_SETTINGS

    if md.mode == SchemaMode.JSON_SCHEMA:
        return to_json_schema(md, nodes, settings)
    if md.mode == SchemaMode.JSONLD_CONTEXT:
        return to_jsonld_context(md, nodes, settings)
    raise UnsupportedModeError(md.mode)


def compile_project(
    project: SchemaProject,
    settings: Optional[CompilerSettings] = None,
    *,
    mode: Optional[Union[SchemaMode, str]] = None,
) -> Dict[str, Any]:
    """Compile a project, optionally overriding its metadata mode."""
    md = project.metadata
    if mode is not None:
        md = md.model_copy(update={"mode": SchemaMode(mode)})
    return compile_schema(md, project.properties, settings)


def dumps(document: Dict[str, Any], indent: Optional[int] = DEFAULT_JSON_INDENT) -> str:
    """Serialize a compiled document (key order preserved)."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


# --- Internals --- #

def _coerce_metadata(metadata: MetadataInput) -> SchemaMetadata:
    if isinstance(metadata, SchemaMetadata):
        return metadata
    return SchemaMetadata.model_validate(dict(metadata))


def _coerce_nodes(properties: PropertiesInput) -> List[PropertyNode]:
    if all(isinstance(p, PropertyNode) for p in properties):
        return list(properties)  # type: ignore[arg-type]
    return _NODES_ADAPTER.validate_python([p if isinstance(p, PropertyNode) else dict(p) for p in properties])


__all__ = [
    "CompilerSettings",
    "compile_schema",
    "compile_project",
    "dumps",
    "to_json_schema",
    "to_jsonld_context",
]
