#!/usr/bin/env python3
"""
Purpose:
    Compiles a property tree into a JSON Schema (Draft 2020-12) validating the
    `credentialSubject` of a verifiable credential.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from vcschema.core.constants import (
    CREDENTIAL_SUBJECT_KEY,
    GOVERNANCE_DOC_KEY,
    JSON_SCHEMA_DRAFT_URI,
)
from vcschema.core.compiler.settings import CompilerSettings, DEFAULT_SETTINGS
from vcschema.core.compiler.tree import Ancestry, descend, named, required_names
from vcschema.core.schema.metadata import SchemaMetadata
from vcschema.core.schema.property_node import PropertyNode
from vcschema.core.schema.property_type import PropertyType
from vcschema.core.utils import generate_schema_id

logger = logging.getLogger(__name__)


def build_property_schema(node: PropertyNode, ancestors: Ancestry = ()) -> Dict[str, Any]:
    """
    Build the constraint object for one property.

    Only constraints relevant to the node's type are copied; absent values are
    omitted. Objects recurse into their properties, arrays into their item.
    """
    ancestors = descend(node, ancestors)
    schema: Dict[str, Any] = {}

    title = node.title or node.name
    if title:
        schema["title"] = title
    schema["type"] = node.type.value
    if node.description:
        schema["description"] = node.description

    schema.update(node.constraints())

    if node.type == PropertyType.ARRAY and node.items is not None:
        schema["items"] = build_property_schema(node.items, ancestors)

    if node.type == PropertyType.OBJECT and node.properties:
        schema.update(build_object_body(node.properties, ancestors))

    return schema


def build_object_body(nodes: Sequence[PropertyNode], ancestors: Ancestry = ()) -> Dict[str, Any]:
    """`properties` map plus `required` (omitted when empty) for a list of nodes."""
    body: Dict[str, Any] = {
        "properties": {n.name: build_property_schema(n, ancestors) for n in named(nodes)},
    }
    required = required_names(nodes)
    if required:
        body["required"] = required
    return body


def resolve_schema_id(metadata: SchemaMetadata, settings: CompilerSettings = DEFAULT_SETTINGS) -> str:
    """Explicit `schemaId`, else one derived from category/credential name or title."""
    if metadata.schema_id:
        return metadata.schema_id
    derived = generate_schema_id(
        metadata.title,
        metadata.category,
        metadata.credential_name,
        base_url=settings.schema_base_url,
    )
    logger.debug("Derived $id %r for schema %r", derived, metadata.title)
    return derived


def to_json_schema(
    metadata: SchemaMetadata,
    properties: Sequence[PropertyNode],
    settings: Optional[CompilerSettings] = None,
) -> Dict[str, Any]:
    """
    Compile `properties` into a JSON Schema document.

    Envelope: `$schema`, `$id`, `title`, `description` (when set), `type`,
    `properties.credentialSubject`, and `x-governance-doc` when a governance
    document URL is configured.
    """
    settings = settings or DEFAULT_SETTINGS

    subject: Dict[str, Any] = {"type": "object"}
    subject.update(build_object_body(properties))

    schema: Dict[str, Any] = {
        "$schema": JSON_SCHEMA_DRAFT_URI,
        "$id": resolve_schema_id(metadata, settings),
        "title": metadata.title,
    }
    if metadata.description:
        schema["description"] = metadata.description
    schema["type"] = "object"
    schema["properties"] = {CREDENTIAL_SUBJECT_KEY: subject}
    if metadata.governance_doc_url:
        schema[GOVERNANCE_DOC_KEY] = metadata.governance_doc_url
    return schema
