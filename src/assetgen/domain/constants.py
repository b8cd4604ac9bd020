from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes generator defaults, diagnostic identifiers and the heuristics
used to recognize asset-looking string literals.
"""

from typing import List, Tuple

DEFAULT_CLASS_NAME = "StaticAssets"
DEFAULT_PATH_BASE = "/"
DEFAULT_ROOT_DIRECTORY = "wwwroot"
DEFAULT_CONFIG_FILE = "assetgen.json"

# Marker placed on the first line of every generated module
GENERATED_MARKER = "# <auto-generated/>"

# Characters that arm upper-casing of the next identifier character
IDENTIFIER_SEPARATORS = frozenset(".-_ ")

# Unicode general categories treated as letters or digits
IDENTIFIER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nd"})

# -----------------------------------------------------------------------------
# DIAGNOSTIC CODES
# -----------------------------------------------------------------------------

DUPLICATE_KEY_CODE = "ASSET001"
DUPLICATE_KEY_MESSAGE = (
    "Multiple assets map to the same key '{key}'. Conflicting file: {path}. "
    "Consider using different file names or folder structure."
)

HARDCODED_PATH_CODE = "ASSET002"
HARDCODED_PATH_MESSAGE = (
    "Hardcoded path '{value}' should use {class_name} class for compile-time safety"
)

# -----------------------------------------------------------------------------
# HARDCODED PATH HEURISTICS
# -----------------------------------------------------------------------------

ASSET_DIRECTORY_PREFIXES: Tuple[str, ...] = (
    "/images/", "/css/", "/js/", "/fonts/", "/lib/", "/assets/",
)

ASSET_EXTENSIONS: Tuple[str, ...] = (
    ".css", ".js", ".png", ".jpg", ".jpeg", ".gif", ".svg",
    ".webp", ".ico", ".woff", ".woff2", ".ttf", ".eot",
)

# Identifiers that mark an expression as already going through a generated group
ASSET_GROUP_NAMES: Tuple[str, ...] = ("StaticAssets", "Assets", "WebAssets")

EQUALITY_ASSERTION_CALLS: Tuple[str, ...] = (
    "assertEqual", "assertEquals", "assert_equal", "assert_equals",
    "Equals", "equals", "IsEqualTo", "is_equal_to",
)

# -----------------------------------------------------------------------------
# SCANNER DEFAULTS
# -----------------------------------------------------------------------------

def default_exclude_patterns() -> List[str]:
    """
    Get the directory and file names skipped while scanning a project.

    Dot-prefixed names are not excluded: asset roots commonly hold
    '.well-known' and '.htaccess'.

    Returns:
        List[str]: Regex patterns matched against single path components.
    """
    return [
        r"^(__pycache__|\.git|\.hg|\.svn|\.idea|\.vscode|node_modules)$",
        r"^(\.venv|venv|\.tox|\.nox|\.mypy_cache|\.pytest_cache)$",
        r".*\.pyc$",
    ]
