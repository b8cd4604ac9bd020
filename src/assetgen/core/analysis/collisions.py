from __future__ import annotations

"""
Identifier Collision Detector.

Walks a completed asset tree, computes the fully-qualified key of every node
that carries source files and reports the keys claimed more than once.
"""

from collections import Counter
from typing import Dict, List

from assetgen.domain.asset_models import AssetNode
from assetgen.domain.diagnostics import Diagnostic, duplicate_key_error

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_asset_keys(tree: AssetNode) -> Dict[str, List[str]]:
    """
    Map every fully-qualified key to the sources that claim it.

    Keys are the dot-joined identifiers from (but excluding) the root to a
    node, e.g. 'Images.LogoPng'. A directory that shares its identifier with
    a file or with another directory is listed as '<directory>/' next to
    the other entries.

    Args:
        tree: Root node returned by the tree builder.

    Returns:
        Dict[str, List[str]]: Keys in depth-first insertion order.
    """
    keys: Dict[str, List[str]] = {}
    _collect(tree, "", keys)
    return keys


def detect_collisions(tree: AssetNode) -> Dict[str, List[str]]:
    """
    Return every key claimed by two or more sources.

    All duplicate groups of the tree are returned in one pass, not only
    the first one found.
    """
    return {key: paths for key, paths in collect_asset_keys(tree).items() if len(paths) > 1}


def collision_diagnostics(collisions: Dict[str, List[str]]) -> List[Diagnostic]:
    """Expand duplicate groups into one error per conflicting source."""
    return [
        duplicate_key_error(key, path)
        for key, paths in collisions.items()
        for path in paths
    ]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _collect(node: AssetNode, prefix: str, keys: Dict[str, List[str]]) -> None:
    # Siblings stored apart can still emit the same name (user-add/, UserAdd/)
    name_counts = Counter(child.name for child in node.children.values())

    for child in node.children.values():
        key = f"{prefix}.{child.name}" if prefix else child.name

        entries = list(child.source_paths)
        shared = name_counts[child.name] > 1
        if child.is_conflicted or (shared and child.directory is not None):
            entries.insert(0, f"{child.directory}/")
        if entries:
            keys.setdefault(key, []).extend(entries)

        _collect(child, key, keys)
