#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions for vcschema: slug and type-name
    derivation, publication URL generation, dictionary merge, and file I/O.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from vcschema.core.constants import (
    KEBAB_DISALLOWED_RE, PASCAL_DISALLOWED_RE, WORD_SEPARATOR_RE, SLUG_RE,
    SCHEMA_BASE_URL, CONTEXT_BASE_URL, DEFAULT_TEXT_ENCODING,
)


# --- Naming Helpers --- #

def to_kebab_case(text: Optional[str]) -> str:
    """
    Slugify text for use in published artifact names.

    Examples
    --------
    >>> to_kebab_case("  Home Credential! ")
    'home-credential'
    >>> to_kebab_case("a -- b")
    'a-b'
    """
    if not text:
        return ""
    s = text.strip().lower()
    s = KEBAB_DISALLOWED_RE.sub("", s)
    s = WORD_SEPARATOR_RE.sub("-", s)
    return s.strip("-")


def to_pascal_case(text: Optional[str]) -> str:
    """
    Derive a type name from free text.

    Examples
    --------
    >>> to_pascal_case("Home Credential")
    'HomeCredential'
    >>> to_pascal_case("mailing_address")
    'MailingAddress'
    """
    if not text:
        return ""
    # `_` and `-` split words here. Tooling that strips them and splits on
    # whitespace only publishes `Mailingaddress` for `mailing_address`, so
    # implicit type names for such properties differ between the two.
    s = PASCAL_DISALLOWED_RE.sub("", text)
    words = [w for w in WORD_SEPARATOR_RE.split(s) if w]
    return "".join(w[0].upper() + w[1:].lower() for w in words)


def is_slug(text: str) -> bool:
    """Return True if text is a finished slug (lowercase letters, digits, hyphens)."""
    return bool(SLUG_RE.fullmatch(text))


def generate_artifact_name(category: Optional[str] = None, credential_name: Optional[str] = None) -> str:
    """
    Build the `{category}-{credential-name}` artifact name (either part optional).
    Returns '' when both parts are absent.
    """
    parts = [to_kebab_case(p) for p in (category, credential_name) if p]
    return "-".join(p for p in parts if p)


def _artifact_slug(title: Optional[str], category: Optional[str], credential_name: Optional[str]) -> str:
    artifact = generate_artifact_name(category, credential_name)
    if artifact:
        return artifact
    return to_kebab_case(title)


def generate_schema_id(
    title: Optional[str],
    category: Optional[str] = None,
    credential_name: Optional[str] = None,
    *,
    base_url: str = SCHEMA_BASE_URL,
) -> str:
    """
    Derive a schema `$id` from category/credential name, falling back to the title.
    Returns '' when nothing usable is given.
    """
    slug = _artifact_slug(title, category, credential_name)
    if not slug:
        return ""
    return f"{base_url.rstrip('/')}/{slug}.schema.json"


def generate_context_url(
    title: Optional[str],
    category: Optional[str] = None,
    credential_name: Optional[str] = None,
    *,
    base_url: str = CONTEXT_BASE_URL,
) -> str:
    """
    Derive a JSON-LD context URL from category/credential name, falling back to the title.
    Returns '' when nothing usable is given.
    """
    slug = _artifact_slug(title, category, credential_name)
    if not slug:
        return ""
    return f"{base_url.rstrip('/')}/{slug}.context.jsonld"


def vocab_namespace(vocab_url: str) -> str:
    """Return the IRI namespace bound to the vocabulary prefix."""
    if vocab_url.endswith(("#", "/")):
        return vocab_url
    return f"{vocab_url}#"


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
