#!/usr/bin/env python3
"""
vcschema configuration loader.
"""

import os
from pathlib import Path
from typing import Any, Dict, Final

from vcschema.core.constants import (
    SCHEMA_BASE_URL,
    CONTEXT_BASE_URL,
    DEFAULT_VOCAB_URL,
    DEFAULT_CONTEXT_URL,
    DEFAULT_JSON_INDENT,
)
from vcschema.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "schema_base_url": SCHEMA_BASE_URL,
    "context_base_url": CONTEXT_BASE_URL,
    "default_vocab_url": DEFAULT_VOCAB_URL,
    "default_context_url": DEFAULT_CONTEXT_URL,
    "output": {"indent": DEFAULT_JSON_INDENT},
    "logging": {"level": "INFO"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "vcschema" / "config.json"
PROJECT_CONFIG_NAME: Final[str] = "vcschema.json"

# Environment variable -> top-level config key
ENV_OVERRIDES: Final[Dict[str, str]] = {
    "VCSCHEMA_SCHEMA_BASE_URL": "schema_base_url",
    "VCSCHEMA_CONTEXT_BASE_URL": "context_base_url",
    "VCSCHEMA_VOCAB_URL": "default_vocab_url",
    "VCSCHEMA_CONTEXT_URL": "default_context_url",
}


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load vcschema configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/vcschema/config.json)
        3. Project config (./vcschema.json)
        4. Environment overrides:
           - VCSCHEMA_SCHEMA_BASE_URL, VCSCHEMA_CONTEXT_BASE_URL
           - VCSCHEMA_VOCAB_URL, VCSCHEMA_CONTEXT_URL
           - VCSCHEMA_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = dict(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    config = merge_dicts(config, load_json_file(Path.cwd() / PROJECT_CONFIG_NAME))

    # 4) environment overrides
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config[key] = value.strip()

    log_level_env = os.getenv("VCSCHEMA_LOG_LEVEL")
    if log_level_env:
        config = merge_dicts(config, {"logging": {"level": log_level_env}})

    return config
