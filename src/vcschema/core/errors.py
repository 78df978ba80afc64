#!/usr/bin/env python3
"""
Purpose:
    Exception hierarchy raised by the vcschema compiler for input it cannot
    represent. Malformed-but-tolerable input (missing names, empty enums) is
    never an error; it is skipped during compilation.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable


class SchemaCompilerError(Exception):
    """Base class for all compiler errors."""


class UnsupportedModeError(SchemaCompilerError, ValueError):
    """Raised when metadata selects an output mode the compiler does not know."""

    def __init__(self, mode: Any):
        self.mode = mode
        super().__init__(f"Unsupported output mode: {mode!r}")


class DuplicateTypeIdError(SchemaCompilerError):
    """
    Raised when two nested-type blocks share a type name but define different
    term mappings. Identical blocks under the same name are merged instead.
    """

    def __init__(self, type_name: str, existing: Dict[str, Any], incoming: Dict[str, Any]):
        self.type_name = type_name
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Type {type_name!r} is defined twice with different terms: "
            f"{sorted(existing)} vs {sorted(incoming)}"
        )


class CyclicPropertyTreeError(SchemaCompilerError):
    """Raised when a property tree references one of its own ancestors."""

    def __init__(self, path: Iterable[str]):
        self.path = list(path)
        super().__init__(f"Property tree contains a cycle at {'/'.join(self.path) or '<root>'!r}")
