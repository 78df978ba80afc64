#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for vcschema's
    Pydantic models such as optional URLs/labels and vocabulary prefixes.
"""

from typing import Any, Annotated, Optional
from pydantic import BeforeValidator

from vcschema.core.constants import VOCAB_PREFIX_RE


# --- Normalizers --- #

def _normalize_optional_text(v: Any) -> Optional[str]:
    """
    Normalize an optional free-text value:
    - None stays None
    - coerce to str and trim whitespace
    - empty/whitespace-only -> None
    """
    if v is None:
        return None
    text = str(v).strip()
    return text if text != "" else None


def _normalize_text(v: Any) -> str:
    """Like `_normalize_optional_text`, but absent values become ''."""
    return _normalize_optional_text(v) or ""


def _normalize_vocab_prefix(v: Any) -> str:
    """
    Normalize a compact-IRI prefix:
    - coerce to str, strip whitespace and a trailing ':'
    - validate via fullmatch against VOCAB_PREFIX_RE
    """
    text = "" if v is None else str(v).strip().rstrip(":")
    if not VOCAB_PREFIX_RE.fullmatch(text):
        raise ValueError(
            f"Invalid vocabulary prefix: {text!r}. Allowed pattern: {VOCAB_PREFIX_RE.pattern!r}"
        )
    return text


# --- Reusable Annotated types --- #

OptionalText = Annotated[Optional[str], BeforeValidator(_normalize_optional_text)]
Text = Annotated[str, BeforeValidator(_normalize_text)]
VocabPrefix = Annotated[str, BeforeValidator(_normalize_vocab_prefix)]
