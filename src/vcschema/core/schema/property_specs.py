#!/usr/bin/env python3
"""
Purpose:
    Defines Pydantic specification models for each supported property type,
    holding the type-specific constraints of a PropertyNode. Field aliases are
    the JSON Schema keyword names, which is also the camelCase shape authored
    by the schema builder UI.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union, List, TYPE_CHECKING
from pydantic import BaseModel, ConfigDict, Field, field_validator

from vcschema.core.schema.property_type import StringFormat

if TYPE_CHECKING:
    from .property_node import PropertyNode


Bound = Union[int, float]


class _SpecBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


# --- Per-type spec models --- #

class StringSpec(_SpecBase):
    """Constraints for a string property."""
    kind: Literal["string"] = "string"
    min_length: Optional[int] = Field(default=None, alias="minLength", ge=0)
    max_length: Optional[int] = Field(default=None, alias="maxLength", ge=0)
    format: Optional[StringFormat] = Field(default=None, description="Fixed string-format tag.")
    pattern: Optional[str] = Field(default=None, description="Regex applied to string values.")
    enum: Optional[List[str]] = Field(default=None, description="Allowed values; empty means absent.")

    @field_validator("format", "pattern", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("enum")
    @classmethod
    def _empty_enum_is_absent(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return v or None


class _BoundsSpec(_SpecBase):
    """Numeric bounds shared by integer and number properties."""
    minimum: Optional[Bound] = None
    maximum: Optional[Bound] = None
    exclusive_minimum: Optional[Bound] = Field(default=None, alias="exclusiveMinimum")
    exclusive_maximum: Optional[Bound] = Field(default=None, alias="exclusiveMaximum")


class IntegerSpec(_BoundsSpec):
    """Constraints for an integer property."""
    kind: Literal["integer"] = "integer"


class NumberSpec(_BoundsSpec):
    """Constraints for a number property."""
    kind: Literal["number"] = "number"


class BooleanSpec(_SpecBase):
    """A boolean property has no constraints."""
    kind: Literal["boolean"] = "boolean"


class ArraySpec(_SpecBase):
    """Constraints for an array property, with one element shape."""
    kind: Literal["array"] = "array"
    min_items: Optional[int] = Field(default=None, alias="minItems", ge=0)
    max_items: Optional[int] = Field(default=None, alias="maxItems", ge=0)
    unique_items: bool = Field(default=False, alias="uniqueItems")
    items: Optional["PropertyNode"] = Field(
        default=None,
        description="Shape of each array element.",
    )


class ObjectSpec(_SpecBase):
    """Nested properties of an object, in authored order."""
    kind: Literal["object"] = "object"
    properties: List["PropertyNode"] = Field(
        default_factory=list,
        description="Ordered nested properties.",
    )


# --- Discriminated union of all per-type specs --- #

PropertySpec = Annotated[
    Union[StringSpec, IntegerSpec, NumberSpec, BooleanSpec, ArraySpec, ObjectSpec],
    Field(discriminator="kind"),
]


# --- Forward-Ref Rebuild Utility --- #

def rebuild_specs(PropertyNode: type) -> None:
    """
    Resolve forward references to PropertyNode after it is defined.

    Must be called by the module that defines PropertyNode, once the class exists.
    """
    globals()["PropertyNode"] = PropertyNode
    for cls in (ArraySpec, ObjectSpec):
        cls.model_rebuild()
