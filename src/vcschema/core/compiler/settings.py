#!/usr/bin/env python3
"""
Purpose:
    Compiler settings: publication base URLs and JSON-LD fallbacks used when
    metadata leaves `$id`, `contextUrl` or `vocabUrl` empty.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from vcschema.core.constants import (
    SCHEMA_BASE_URL,
    CONTEXT_BASE_URL,
    DEFAULT_VOCAB_URL,
    DEFAULT_CONTEXT_URL,
)


class CompilerSettings(BaseModel):
    """Immutable compiler settings; passed by value into every compile call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_base_url: str = SCHEMA_BASE_URL
    context_base_url: str = CONTEXT_BASE_URL
    default_vocab_url: str = DEFAULT_VOCAB_URL
    default_context_url: str = DEFAULT_CONTEXT_URL

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CompilerSettings":
        """Pick the compiler keys out of a merged configuration dict."""
        keys = cls.model_fields.keys()
        return cls(**{k: v for k, v in config.items() if k in keys and v})


DEFAULT_SETTINGS = CompilerSettings()
