from __future__ import annotations

"""
Asset Tree Data Models.

Provides the input record produced for every discovered static file and the
recursive node type used to build the hierarchical map of named asset groups.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# -----------------------------------------------------------------------------
# INPUT RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetRecord:
    """
    Represents one discovered file handed over by the build adapter.

    Attributes:
        source_path: Original path of the file as discovered.
        flatten_extensions: If True, every extension collapses into the
            identifier (style.min.css -> StyleMinCss). If False, only the last
            suffix is stripped (style.min.css -> StyleMin).
    """
    source_path: str
    flatten_extensions: bool = True

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class AssetNode:
    """
    A named group (directory) or path constant (file) in the asset tree.

    A node is a group when it was reached through a directory segment, in
    which case 'directory' holds its asset-root-relative path. Leaves carry
    every source path that normalized onto their identifier; more than one
    entry means an identifier collision. Siblings are keyed by the
    case-folded identifier, so names differing only by case share a node.

    Attributes:
        name: Normalized identifier, unique among siblings.
        source_paths: Original source paths mapped onto this identifier.
        children: Child nodes keyed by case-folded identifier, in insertion order.
        directory: Relative directory path for group nodes, None for leaves.
        relative_path: Asset-root-relative path of the first file of a leaf.
    """
    name: str
    source_paths: List[str] = field(default_factory=list)
    children: Dict[str, "AssetNode"] = field(default_factory=dict)
    directory: Optional[str] = None
    relative_path: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.directory is None

    @property
    def is_conflicted(self) -> bool:
        """True when a file and a directory share this identifier."""
        return self.directory is not None and bool(self.source_paths)

    def leaves(self) -> List["AssetNode"]:
        """Leaf children sorted ordinally by identifier."""
        return sorted(
            (c for c in self.children.values() if c.is_leaf),
            key=lambda c: c.name,
        )

    def groups(self) -> List["AssetNode"]:
        """Group children sorted ordinally by identifier."""
        return sorted(
            (c for c in self.children.values() if not c.is_leaf),
            key=lambda c: c.name,
        )
