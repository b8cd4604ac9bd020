from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and the write-if-changed primitive used to
publish generated modules without touching unchanged files.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if resolution fails.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_output_path(output_path: Optional[str], input_path: str, default_name: str) -> str:
    """
    Calculate the destination of the generated module.

    Relative output paths are resolved against the project directory; an
    empty value places 'default_name' at the project root.
    """
    p = (output_path or "").strip()
    if not p:
        return os.path.join(input_path, default_name)
    p = os.path.expandvars(os.path.expanduser(p))
    if not os.path.isabs(p):
        p = os.path.join(input_path, p)
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def read_text_if_exists(path: str) -> Optional[str]:
    """Return the file content, or None when the file does not exist."""
    if not os.path.isfile(path):
        return None
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_if_changed(path: str, content: str) -> bool:
    """
    Persist content unless the file already holds exactly the same text.

    Downstream tooling compares outputs to skip redundant work, so an
    unchanged module keeps its bytes and its modification time.

    Args:
        path: Destination file.
        content: Text to write (UTF-8, '\\n' line endings).

    Returns:
        bool: True if the file was written, False if it was already current.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    if read_text_if_exists(path) == content:
        return False

    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    return True
