#!/usr/bin/env python3
"""
Pydantic model for document-level schema metadata.

Holds the envelope information of a compiled document (title, `$id`,
governance link) and the JSON-LD settings consulted in `jsonld-context` mode.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vcschema.core.annotated_types import OptionalText, Text, VocabPrefix
from vcschema.core.constants import DEFAULT_CONTEXT_VERSION, DEFAULT_VOCAB_PREFIX
from vcschema.core.schema.property_type import SchemaMode


class SchemaMetadata(BaseModel):
    """
    Metadata attached to a credential schema project.

    Fields
    ------
    title, description:
        Free text. Whitespace is trimmed; absent -> ''.
    schemaId:
        Explicit `$id`. When empty, the compiler derives one from
        category/credentialName or the title.
    category, credentialName:
        Namespace parts of the published artifact name.
    mode:
        `json-schema` or `jsonld-context`.
    vocabUrl, contextUrl, contextVersion, protected, vocabPrefix:
        JSON-LD settings (ignored in `json-schema` mode).
    governanceDocUrl, governanceDocName:
        Link to the governance document; the URL is emitted as `x-governance-doc`.
    extensions:
        Free-form key/value bag for caller-defined metadata.

    Example
    -------
    >>> md = SchemaMetadata(title=" Home Credential ", mode="jsonld-context")
    >>> md.title
    'Home Credential'
    >>> md.mode
    <SchemaMode.JSONLD_CONTEXT: 'jsonld-context'>
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    title: Text = ""
    description: Text = ""
    schema_id: Text = Field(default="", alias="schemaId")
    category: OptionalText = None
    credential_name: OptionalText = Field(default=None, alias="credentialName")
    mode: SchemaMode = SchemaMode.JSON_SCHEMA

    vocab_url: OptionalText = Field(default=None, alias="vocabUrl")
    context_url: OptionalText = Field(default=None, alias="contextUrl")
    context_version: float = Field(default=DEFAULT_CONTEXT_VERSION, alias="contextVersion")
    protected: bool = True
    vocab_prefix: VocabPrefix = Field(default=DEFAULT_VOCAB_PREFIX, alias="vocabPrefix")

    governance_doc_url: OptionalText = Field(default=None, alias="governanceDocUrl")
    governance_doc_name: OptionalText = Field(default=None, alias="governanceDocName")

    extensions: dict[str, Any] = Field(
        default_factory=dict,
        description="User-defined metadata (free-form key/value).",
    )

    # --- Validators --- #

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, v: Any) -> Any:
        if v is None:
            return SchemaMode.JSON_SCHEMA
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("context_version", mode="before")
    @classmethod
    def _default_context_version(cls, v: Any) -> Any:
        return DEFAULT_CONTEXT_VERSION if v is None else v

    @field_validator("extensions")
    @classmethod
    def _validate_extensions(cls, ext: dict[str, Any]) -> dict[str, Any]:
        """
        Ensure extension keys are non-empty strings and normalize by stripping whitespace.
        """
        normalized: dict[str, Any] = {}
        for k, val in ext.items():
            ks = k.strip()
            if not ks:
                raise ValueError("Extension keys must be non-empty strings.")
            if ks in normalized:
                raise ValueError(f"Duplicate extension key after normalization: {ks!r}")
            normalized[ks] = val
        return normalized

    # --- Helpers --- #

    def to_authoring_dict(self) -> dict[str, Any]:
        """Dump the camelCase shape stored in project files, omitting absent values."""
        data = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        if not data.get("extensions"):
            data.pop("extensions", None)
        return data
