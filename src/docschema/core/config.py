#!/usr/bin/env python3
"""
docschema configuration loader.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Final

from docschema.core.constants import DEFAULT_DEFINITIONS_PREFIX
from docschema.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "strict": False,
    "definitions_prefix": DEFAULT_DEFINITIONS_PREFIX,
    "logging": {"level": "INFO"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "docschema" / "config.json"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load docschema configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/docschema/config.json)
        3. Project config (./docschema.json)
        4. Environment overrides:
           - DOCSCHEMA_STRICT (1/true/yes/on enables strict mode)
           - DOCSCHEMA_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "docschema.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    strict_env = os.getenv("DOCSCHEMA_STRICT")
    if strict_env is not None:
        config["strict"] = strict_env.strip().lower() in _TRUTHY

    log_level_env = os.getenv("DOCSCHEMA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config


def configure_logging(config: Dict[str, Any]) -> None:
    """Apply `config['logging']['level']` to the `docschema` logger."""
    level = str(config.get("logging", {}).get("level", "INFO")).upper()
    logging.getLogger("docschema").setLevel(level)
