#!/usr/bin/env python3
"""
Purpose:
    Wires together the vcschema application context: merged configuration,
    compiler settings and logging. The context is built explicitly by the
    caller and passed to each command.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from vcschema.core.compiler.settings import CompilerSettings
from vcschema.core.config import load_config
from vcschema.core.constants import DEFAULT_JSON_INDENT
from vcschema.core.log import configure_logging


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and compiler settings."""
    config: Dict[str, Any]
    settings: CompilerSettings

    @property
    def indent(self) -> int:
        return int(self.config.get("output", {}).get("indent", DEFAULT_JSON_INDENT))


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    setup_logging: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        setup_logging:
            If True, configures the package logger from `config['logging']['level']`.

    Returns:
        AppContext: immutable bundle of config and compiler settings.
    """
    cfg = config or load_config()
    if setup_logging:
        configure_logging(cfg.get("logging", {}).get("level"))
    return AppContext(config=cfg, settings=CompilerSettings.from_config(cfg))
