#!/usr/bin/env python3
"""
Purpose:
    Implements the PropertyNode model for credential property trees, handling
    validation, packing of flat type-specific keys into a tagged `spec`,
    JSON-LD term extensions, and flat (camelCase) serialization.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
    model_serializer,
)

from vcschema.core.schema.property_type import PropertyType
from vcschema.core.schema.property_specs import (
    PropertySpec,
    StringSpec,
    IntegerSpec,
    NumberSpec,
    BooleanSpec,
    ArraySpec,
    ObjectSpec,
    rebuild_specs,
)

logger = logging.getLogger(__name__)


# --- Spec registry --- #
# Which spec model holds the constraints of each PropertyType.
SPEC_REGISTRY: Dict[PropertyType, Type[BaseModel]] = {
    PropertyType.STRING: StringSpec,
    PropertyType.INTEGER: IntegerSpec,
    PropertyType.NUMBER: NumberSpec,
    PropertyType.BOOLEAN: BooleanSpec,
    PropertyType.ARRAY: ArraySpec,
    PropertyType.OBJECT: ObjectSpec,
}


def spec_keys(ft: PropertyType) -> set[str]:
    """Flat authoring keys (alias and field name) accepted for a property type."""
    keys: set[str] = set()
    for fname, finfo in SPEC_REGISTRY[ft].model_fields.items():
        if fname == "kind":
            continue
        keys.add(fname)
        if finfo.alias:
            keys.add(finfo.alias)
    return keys


def _other_type_keys(this_ft: PropertyType) -> set[str]:
    keys: set[str] = set()
    for ft in SPEC_REGISTRY:
        if ft != this_ft:
            keys |= spec_keys(ft)
    return keys - spec_keys(this_ft)


# --- Models --- #

class JsonLdExtension(BaseModel):
    """
    JSON-LD term hints attached to a property (consulted in jsonld-context mode).

    - vocabTermId:   canonical vocabulary term, emitted as `<prefix>:<term>`
    - complexTypeId: name of a reusable nested type
    - customId:      full `@id` override
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    vocab_term_id: Optional[str] = Field(default=None, alias="vocabTermId")
    complex_type_id: Optional[str] = Field(default=None, alias="complexTypeId")
    custom_id: Optional[str] = Field(default=None, alias="customId")

    @field_validator("vocab_term_id", "complex_type_id", "custom_id", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_empty(self) -> bool:
        return not (self.vocab_term_id or self.complex_type_id or self.custom_id)


class PropertyNode(BaseModel):
    """
    One property in a credential's data shape.

    Flat authoring (the shape the schema builder stores):
      - Common keys: id, name, title, description, type, required, jsonLd
      - Type-specific keys live at top-level but are packed into `spec` internally

    Type-specific (live in `spec`; authored flat):
      - string:          minLength, maxLength, format, pattern, enum
      - integer/number:  minimum, maximum, exclusiveMinimum, exclusiveMaximum
      - array:           minItems, maxItems, uniqueItems, items (PropertyNode)
      - object:          properties (list[PropertyNode])

    Keys that belong to a different type are dropped, not rejected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Opaque UI identifier; never emitted.")
    name: str = Field(default="", description="Output key; empty names are skipped.")
    title: Optional[str] = Field(default=None, description="Human-readable title.")
    description: Optional[str] = Field(default=None, description="Human-readable description.")
    type: PropertyType = Field(default=PropertyType.STRING, description="Property type.")
    required: bool = Field(default=False, description="Listed in the parent's `required`.")
    spec: Optional[PropertySpec] = Field(default=None, description="Type-specific constraints.")
    json_ld: Optional[JsonLdExtension] = Field(default=None, alias="jsonLd")

    # --- Pre-parse: pack flat keys into spec --- #
    @model_validator(mode="before")
    @classmethod
    def _pack_flat_spec(cls, data: Any) -> Any:
        """
        Convert flat authoring keys into a typed `spec` based on `type`.
        Keys owned by another type are discarded.
        """
        if not isinstance(data, dict):
            return data

        ft = PropertyType.parse(data.get("type"))
        allowed = spec_keys(ft)
        flat = {k: v for k, v in data.items() if k in allowed}
        has_spec = data.get("spec") is not None
        if flat and has_spec:
            raise ValueError("Provide either flat type-specific keys or 'spec', not both")

        stray = sorted(k for k in data if k in _other_type_keys(ft))
        if stray:
            logger.debug("Ignoring keys %s on %s property %r", stray, ft.value, data.get("name"))

        data = {k: v for k, v in data.items() if k not in allowed and k not in stray}
        data["type"] = ft
        if not has_spec:
            data["spec"] = {"kind": ft.value, **flat}
        return data

    # --- Validators --- #

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: Any) -> str:
        """Names must be strings; a missing name becomes '' (skipped on output)."""
        if v is None:
            return ""
        if not isinstance(v, str):
            raise ValueError(f"The 'name' must be a string, not {type(v).__name__}")
        return v

    @field_validator("title", "description", mode="before")
    @classmethod
    def _blank_text_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v

    @field_validator("json_ld")
    @classmethod
    def _drop_empty_json_ld(cls, v: Optional[JsonLdExtension]) -> Optional[JsonLdExtension]:
        if v is None or v.is_empty():
            return None
        return v

    @model_validator(mode="after")
    def _ensure_spec_kind_matches(self) -> "PropertyNode":
        if self.spec is not None and self.spec.kind != self.type.value:
            raise ValueError(f"'spec.kind' ({self.spec.kind}) does not match type '{self.type.value}'")
        return self

    # --- Tree access --- #

    @property
    def children(self) -> List["PropertyNode"]:
        """Direct child nodes: object properties, or the single array item."""
        if isinstance(self.spec, ObjectSpec):
            return list(self.spec.properties)
        if isinstance(self.spec, ArraySpec) and self.spec.items is not None:
            return [self.spec.items]
        return []

    @property
    def properties(self) -> List["PropertyNode"]:
        """Nested properties of an object node ([] for other types)."""
        if isinstance(self.spec, ObjectSpec):
            return list(self.spec.properties)
        return []

    @property
    def items(self) -> Optional["PropertyNode"]:
        """Element shape of an array node (None for other types)."""
        if isinstance(self.spec, ArraySpec):
            return self.spec.items
        return None

    @property
    def nested_properties(self) -> List["PropertyNode"]:
        """
        Properties that get their own JSON-LD type block: those of a non-empty
        object, or of the object element of an array.
        """
        if self.properties:
            return self.properties
        item = self.items
        if item is not None and item.type == PropertyType.OBJECT:
            return item.properties
        return []

    @property
    def is_emitted(self) -> bool:
        """True if the node has a name and therefore appears in output."""
        return bool(self.name)

    def constraints(self) -> Dict[str, Any]:
        """
        Scalar constraints relevant to this node's type, keyed by their JSON
        Schema keyword. Absent values are omitted; `0` is kept.
        """
        if self.spec is None:
            return {}
        out = self.spec.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"kind", "items", "properties"},
            mode="json",
        )
        if not out.get("uniqueItems", True):
            del out["uniqueItems"]
        return out

    # --- Serializer: flatten spec back to top-level --- #
    @model_serializer(mode="plain")
    def _dump_flat(self) -> Dict[str, Any]:
        """Emit the flat camelCase authoring shape, omitting absent fields."""
        base: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "type": self.type.value,
            "required": self.required,
        }
        out = {k: v for k, v in base.items() if v is not None}
        out.update(self.constraints())
        if self.items is not None:
            out["items"] = self.items._dump_flat()
        if isinstance(self.spec, ObjectSpec) and self.spec.properties:
            out["properties"] = [p._dump_flat() for p in self.spec.properties]
        if self.json_ld is not None:
            out["jsonLd"] = self.json_ld.model_dump(by_alias=True, exclude_none=True)
        return out


# --- Forward-Ref Resolution --- #
PropertyNode.model_rebuild()
rebuild_specs(PropertyNode)
