#!/usr/bin/env python3
"""
Core constants used across vcschema.

- Publication URLs: where compiled schemas and contexts are hosted (VDR layout).
- JSON-LD defaults: vocabulary prefix, context version and fallback URLs.
- File handling: supported project extensions and default text encoding.
- Regular expressions: compiled patterns used by the naming helpers.
"""

import re
from typing import Final

# --- Publication URLs --- #

VDR_BASE_URL: Final[str] = "https://openpropertyassociation.ca/credentials"
SCHEMA_BASE_URL: Final[str] = f"{VDR_BASE_URL}/schemas"
CONTEXT_BASE_URL: Final[str] = f"{VDR_BASE_URL}/contexts"

# JSON Schema dialect emitted in the `$schema` key
JSON_SCHEMA_DRAFT_URI: Final[str] = "https://json-schema.org/draft/2020-12/schema"

# Extension key carrying the governance document link
GOVERNANCE_DOC_KEY: Final[str] = "x-governance-doc"

# Wrapper object validated by the compiled JSON Schema
CREDENTIAL_SUBJECT_KEY: Final[str] = "credentialSubject"


# --- JSON-LD defaults --- #

DEFAULT_VOCAB_URL: Final[str] = "https://openpropertyassociation.ca/vocab.jsonld"
DEFAULT_CONTEXT_URL: Final[str] = "https://openpropertyassociation.ca/context.jsonld"
DEFAULT_VOCAB_PREFIX: Final[str] = "copa"
DEFAULT_CONTEXT_VERSION: Final[float] = 1.1


# --- File handling --- #

SUPPORTED_PROJECT_EXT: Final[frozenset[str]] = frozenset({".json", ".yaml", ".yml"})
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"
DEFAULT_JSON_INDENT: Final[int] = 2


# --- Regular Expressions --- #

# Characters kept by kebab-case slugification (after lowercasing)
KEBAB_DISALLOWED_RE: re.Pattern[str] = re.compile(r"[^a-z0-9\s-]")

# Characters kept by PascalCase conversion (word separators included)
PASCAL_DISALLOWED_RE: re.Pattern[str] = re.compile(r"[^A-Za-z0-9\s_-]")

# Word separators for PascalCase conversion
WORD_SEPARATOR_RE: re.Pattern[str] = re.compile(r"[\s_-]+")

# A finished slug: lowercase letters, digits and single inner hyphens
SLUG_RE: re.Pattern[str] = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

# Vocabulary prefixes must be valid compact-IRI prefixes
VOCAB_PREFIX_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if not VOCAB_PREFIX_RE.fullmatch(DEFAULT_VOCAB_PREFIX):
        raise RuntimeError(
            f"DEFAULT_VOCAB_PREFIX must be a valid compact-IRI prefix, got {DEFAULT_VOCAB_PREFIX!r}"
        )

validate_constants()
