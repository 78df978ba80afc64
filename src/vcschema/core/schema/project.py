#!/usr/bin/env python3
"""
Purpose:
    Defines the SchemaProject model: a saved credential schema (metadata plus
    the ordered root property list) as exchanged with the schema builder, and
    its JSON/YAML file I/O.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from vcschema.core.constants import DEFAULT_JSON_INDENT, DEFAULT_TEXT_ENCODING, SUPPORTED_PROJECT_EXT
from vcschema.core.annotated_types import Text
from vcschema.core.schema.metadata import SchemaMetadata
from vcschema.core.schema.property_node import PropertyNode


# --- Model --- #

class SchemaProject(BaseModel):
    """
    A credential schema project.

    Fields:
    -------
    name:
        Display name of the project (free text).
    metadata:
        Document-level settings, validated by `SchemaMetadata`.
    properties:
        Ordered `credentialSubject` properties (nested via specs).
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: Text = ""
    metadata: SchemaMetadata = Field(default_factory=SchemaMetadata)
    properties: List[PropertyNode] = Field(default_factory=list)

    # --- Convenience --- #

    def iter_nodes(self) -> Iterator[PropertyNode]:
        """Depth-first walk over every node, parents before children."""
        stack = list(reversed(self.properties))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_authoring_dict(self) -> Dict[str, Any]:
        """Flat camelCase shape used by project files."""
        data: Dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        data["metadata"] = self.metadata.to_authoring_dict()
        data["properties"] = [p.model_dump() for p in self.properties]
        return data

    # --- File IO --- #

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SchemaProject":
        """
        Load a SchemaProject from a JSON or YAML file.

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if the extension is not supported or the payload does not parse
            ValidationError: if the payload fails model validation
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"The file {str(p)!r} does not exist")
        suffix = p.suffix.lower()
        if suffix not in SUPPORTED_PROJECT_EXT:
            raise ValueError(
                f"Invalid project file extension for {p.name!r}; expected one of {sorted(SUPPORTED_PROJECT_EXT)}"
            )
        text = p.read_text(encoding=DEFAULT_TEXT_ENCODING)
        data = _parse_text(text, suffix, p)
        if not isinstance(data, dict):
            raise ValueError(f"Project file {str(p)!r} must contain a mapping at the top level")
        return cls.model_validate(data)

    def to_file(self, path: Union[str, Path]) -> Path:
        """Write the project to JSON or YAML, chosen by the file extension."""
        p = Path(path)
        suffix = p.suffix.lower()
        if suffix not in SUPPORTED_PROJECT_EXT:
            raise ValueError(
                f"Invalid project file extension for {p.name!r}; expected one of {sorted(SUPPORTED_PROJECT_EXT)}"
            )
        data = self.to_authoring_dict()
        if suffix == ".json":
            text = json.dumps(data, indent=DEFAULT_JSON_INDENT, ensure_ascii=False) + "\n"
        else:
            text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
        p.write_text(text, encoding=DEFAULT_TEXT_ENCODING)
        return p


# --- Internals --- #

def _parse_text(text: str, suffix: str, path: Path) -> Any:
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
            ) from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {str(path)!r}: {e}") from e
