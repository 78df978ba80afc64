#!/usr/bin/env python3
"""
Formatting helpers for vcschema.

- One-line messages for pydantic v2 `ValidationError` (project/property input).
- One-line messages for any error surfaced by the CLI.
"""
from __future__ import annotations

from typing import Any, Iterable, List

from pydantic import ValidationError

from vcschema.core.errors import SchemaCompilerError


# --- Public API --- #

def format_validation_errors(exc: ValidationError) -> List[str]:
    """
    Return stable one-line messages for a pydantic ValidationError.

    Example:
        properties[1].properties[0].name: Input should be a valid string
    """
    msgs: List[str] = []
    for err in exc.errors():
        path = format_error_loc(err.get("loc", ()))
        msgs.append(f"{path}: {err.get('msg', 'Validation error')}")
    return msgs


def format_error(exc: BaseException) -> List[str]:
    """Render any error raised while loading or compiling a project."""
    if isinstance(exc, ValidationError):
        return format_validation_errors(exc)
    if isinstance(exc, SchemaCompilerError):
        return [f"{type(exc).__name__}: {exc}"]
    first = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
    return [first]


def format_error_loc(loc: Iterable[Any]) -> str:
    """
    Convert a pydantic error `loc` tuple into a dotted path with index suffixes.
    Discriminator tags injected by pydantic (`string`, `object`, ...) directly
    after `spec` are dropped so paths follow the authored shape.

    Examples:
        ('properties', 1, 'name')             -> "properties[1].name"
        ('spec', 'object', 'properties', 0)   -> "properties[0]"
        ()                                    -> "<root>"
    """
    parts: List[str] = []
    skip_tag = False
    for seg in loc:
        if skip_tag:
            skip_tag = False
            continue
        if seg == "spec":
            skip_tag = True
            continue
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"
