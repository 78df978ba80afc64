#!/usr/bin/env python3
"""
Purpose:
    Defines the PropertyType and StringFormat enumerations for credential
    property trees, along with parsing helpers and display labels, plus the
    compiler output modes.
"""

from __future__ import annotations

from enum import Enum


class PropertyType(str, Enum):
    """
    Supported property types (the JSON Schema primitive types).

    - string  : textual scalar (length, format, pattern, enum)
    - integer : whole-number scalar (bounds)
    - number  : numeric scalar (bounds)
    - boolean : true/false scalar
    - object  : mapping with ordered nested properties
    - array   : homogeneous list with one item shape
    """

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | PropertyType | None) -> PropertyType:
        """
        Coerce input to a `PropertyType`.

        - `PropertyType` instance -> returned as-is
        - `None` -> `PropertyType.STRING` (the authoring default)
        - strings are trimmed and lowercased before lookup

        Raises:
            ValueError: for unknown type names.

        Examples
        --------
        >>> PropertyType.parse(" Integer ")
        <PropertyType.INTEGER: 'integer'>
        >>> PropertyType.parse(None)
        <PropertyType.STRING: 'string'>
        """
        if isinstance(value, PropertyType):
            return value
        if value is None:
            return cls.STRING
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown property type {value!r}; valid types are: {valid}") from None

    @property
    def label(self) -> str:
        return PROPERTY_TYPE_LABELS[self]


class StringFormat(str, Enum):
    """String format tags accepted in the `format` constraint."""

    EMAIL = "email"
    URI = "uri"
    DATE = "date"
    DATE_TIME = "date-time"
    UUID = "uuid"
    HOSTNAME = "hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def label(self) -> str:
        return STRING_FORMAT_LABELS[self]


class SchemaMode(str, Enum):
    """Which document the compiler emits."""

    JSON_SCHEMA = "json-schema"
    JSONLD_CONTEXT = "jsonld-context"


# --- Display labels --- #

PROPERTY_TYPE_LABELS: dict[PropertyType, str] = {
    PropertyType.STRING: "String",
    PropertyType.INTEGER: "Integer",
    PropertyType.NUMBER: "Number",
    PropertyType.BOOLEAN: "Boolean",
    PropertyType.OBJECT: "Object",
    PropertyType.ARRAY: "Array",
}

STRING_FORMAT_LABELS: dict[StringFormat, str] = {
    StringFormat.EMAIL: "Email",
    StringFormat.URI: "URI",
    StringFormat.DATE: "Date (YYYY-MM-DD)",
    StringFormat.DATE_TIME: "Date-Time (ISO 8601)",
    StringFormat.UUID: "UUID",
    StringFormat.HOSTNAME: "Hostname",
    StringFormat.IPV4: "IPv4 Address",
    StringFormat.IPV6: "IPv6 Address",
}
