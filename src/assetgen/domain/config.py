from __future__ import annotations

"""
Configuration Domain Management.

Handles the project-level configuration file (assetgen.json) that lives next
to the scanned project. Missing files and missing keys fall back to the
documented defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from assetgen.domain.constants import (
    DEFAULT_CLASS_NAME,
    DEFAULT_CONFIG_FILE,
    DEFAULT_PATH_BASE,
    DEFAULT_ROOT_DIRECTORY,
    default_exclude_patterns,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_path": "",

        # Generation
        "class_name": DEFAULT_CLASS_NAME,
        "path_base": DEFAULT_PATH_BASE,
        "root_directory": DEFAULT_ROOT_DIRECTORY,
        "flatten_extensions": True,
        "flatten_overrides": {},

        # Discovery
        "exclude_patterns": default_exclude_patterns(),

        # Companion check
        "check_hardcoded_paths": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def find_config_file(input_path: str) -> Optional[str]:
    """Return the project configuration file inside 'input_path', if any."""
    candidate = os.path.join(input_path, DEFAULT_CONFIG_FILE)
    return candidate if os.path.isfile(candidate) else None


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a project configuration file merged over the defaults.

    A missing, unreadable or malformed file is logged and the defaults are
    returned; value types are checked later by the validator.

    Args:
        config_path: Path to a JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()

    if not config_path:
        return config

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found: {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config '{config_path}': top-level value must be an object.")
        return config

    unknown = sorted(k for k in data if k not in config)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in '{config_path}': {', '.join(unknown)}")

    config.update({k: v for k, v in data.items() if k in config})
    logger.debug(f"Configuration loaded from {config_path}")
    return config
