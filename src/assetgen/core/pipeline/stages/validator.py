from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline, ensuring that the configuration
dictionary conforms to the expected schema. Handles type coercion, default
value injection and the generator-specific rules (identifier-safe class
names, non-empty path bases).
"""

import keyword
import logging
from typing import Any, Dict, List, Tuple

from assetgen.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (config file, CLI) into strictly typed
    parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Schema Definition (Declarative mapping)
    string_fields = ["input_path", "class_name", "path_base", "root_directory"]
    bool_fields = ["flatten_extensions", "check_hardcoded_paths"]

    # 3. Field Processing & Normalization
    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults.get(field, False), field, warnings, strict
        )

    # The output path may legitimately be empty (derived from the class name)
    output_path = merged.get("output_path")
    merged["output_path"] = output_path.strip() if isinstance(output_path, str) else ""

    merged["exclude_patterns"] = _as_list_str(
        merged.get("exclude_patterns"), defaults["exclude_patterns"],
        "exclude_patterns", warnings, strict
    )
    merged["flatten_overrides"] = _as_bool_map(
        merged.get("flatten_overrides"), "flatten_overrides", warnings, strict
    )

    # 4. Domain-Specific Normalization
    merged["class_name"] = _normalize_class_name(
        merged["class_name"], defaults["class_name"], warnings, strict
    )
    merged["root_directory"] = _normalize_root_directory(
        merged["root_directory"], defaults["root_directory"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_bool_map(value: Any, field: str, warnings: List[str], strict: bool) -> Dict[str, bool]:
    """Validate a glob -> bool mapping, preserving its order."""
    if value is None:
        return {}

    if not isinstance(value, dict):
        msg = f"Invalid field '{field}': expected dict[str, bool], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return {}

    out: Dict[str, bool] = {}
    for pattern, flag in value.items():
        if not isinstance(pattern, str) or not pattern.strip():
            msg = f"Invalid pattern in '{field}': expected non-empty str."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Entry discarded.")
            continue
        out[pattern.strip()] = _as_bool(flag, True, f"{field}[{pattern}]", warnings, strict)
    return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_class_name(name: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """The root class name is emitted verbatim, so it must be a Python identifier."""
    if name.isidentifier() and not keyword.iskeyword(name):
        return name

    msg = f"Invalid class name '{name}': not a valid Python identifier."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _normalize_root_directory(name: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """The asset root is a single path segment; surrounding slashes are dropped."""
    cleaned = name.replace("\\", "/").strip("/")
    if cleaned and "/" not in cleaned:
        if cleaned != name:
            warnings.append(f"Root directory '{name}' normalized to '{cleaned}'.")
        return cleaned

    msg = f"Invalid root directory '{name}': must be a single directory name."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
