from __future__ import annotations

"""
Asset Tree Builder.

Constructs the hierarchical representation of discovered static assets.
Every path located beneath the asset root is split into segments: directory
segments become named groups, the final segment becomes a path constant.
Files whose identifiers collide accumulate on a single node so that the
collision detector can report all of them.
"""

import logging
import re
from typing import Iterable, List, Optional

from assetgen.core.analysis.identifiers import normalize_identifier, to_pascal_case
from assetgen.domain.asset_models import AssetNode, AssetRecord
from assetgen.domain.constants import DEFAULT_CLASS_NAME, DEFAULT_ROOT_DIRECTORY

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_asset_tree(
        records: Iterable[AssetRecord],
        class_name: str = DEFAULT_CLASS_NAME,
        root_directory: str = DEFAULT_ROOT_DIRECTORY,
) -> AssetNode:
    """
    Build the asset tree from the full set of discovered records.

    Records are processed in the given order, so the order of source paths
    on a colliding node (and of the resulting diagnostics) is reproducible.
    Records that do not live beneath the asset root are ignored.

    Args:
        records: Asset records supplied by the build adapter.
        class_name: Name of the synthetic root group.
        root_directory: Name of the asset root directory.

    Returns:
        AssetNode: The root group node.
    """
    root = AssetNode(name=class_name, directory="")

    for record in records:
        relative_path = relative_asset_path(record.source_path, root_directory)
        if relative_path is None:
            logger.debug(f"Skipping path outside '{root_directory}': {record.source_path}")
            continue
        insert_asset(root, record, relative_path)

    return root


def insert_asset(root: AssetNode, record: AssetRecord, relative_path: str) -> Optional[AssetNode]:
    """
    Insert a single record into the tree.

    Args:
        root: Root group node.
        record: The asset record being inserted.
        relative_path: Path of the record relative to the asset root.

    Returns:
        Optional[AssetNode]: The node that received the source path, or None
                             when the path names a directory rather than a file.
    """
    raw_segments = relative_path.split("/")
    file_name = raw_segments[-1]
    if not file_name:
        logger.debug(f"Skipping directory entry: {record.source_path}")
        return None

    # Doubled separators produce empty segments; they are dropped
    dir_segments = [s for s in raw_segments[:-1] if s]

    node = root
    walked: List[str] = []
    for segment in dir_segments:
        walked.append(segment)
        node = _descend(node, segment, "/".join(walked))

    strip = not record.flatten_extensions
    key = sibling_key(file_name, strip_extension=strip)

    leaf = node.children.get(key)
    if leaf is None:
        leaf = AssetNode(
            name=normalize_identifier(file_name, strip_extension=strip),
            relative_path="/".join(walked + [file_name]),
        )
        node.children[key] = leaf

    leaf.source_paths.append(record.source_path)
    return leaf


def relative_asset_path(
        source_path: str,
        root_directory: str = DEFAULT_ROOT_DIRECTORY,
) -> Optional[str]:
    """
    Return the part of a path that follows the last asset root segment.

    Backslashes are accepted as separators. The asset root is matched
    case-insensitively and must appear as a full '/<root>/' segment.

    Args:
        source_path: Path as supplied by the adapter.
        root_directory: Name of the asset root directory.

    Returns:
        Optional[str]: The relative path, or None if the path is not an asset.
    """
    normalized = source_path.replace("\\", "/")
    match = _find_last_root(normalized, root_directory)
    if match is None:
        return None
    return normalized[match.end():]


def sibling_key(segment: str, strip_extension: bool = False) -> str:
    """
    Key under which a node is stored among its siblings.

    The raw segment is lower-cased before normalization, so Logo.png, LOGO.png
    and logo.png share one node (named by the first spelling inserted) while
    user-add.svg and useradd.svg stay apart.
    """
    return normalize_identifier(segment.lower(), strip_extension=strip_extension)


def is_asset_path(source_path: str, root_directory: str = DEFAULT_ROOT_DIRECTORY) -> bool:
    return relative_asset_path(source_path, root_directory) is not None


def filter_asset_records(
        records: Iterable[AssetRecord],
        root_directory: str = DEFAULT_ROOT_DIRECTORY,
) -> List[AssetRecord]:
    """Keep only the records located beneath the asset root, in order."""
    return [r for r in records if is_asset_path(r.source_path, root_directory)]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _descend(node: AssetNode, segment: str, directory: str) -> AssetNode:
    """Return the child group for a directory segment, creating it if needed."""
    key = sibling_key(segment)
    child = node.children.get(key)
    if child is None:
        child = AssetNode(name=to_pascal_case(segment), directory=directory)
        node.children[key] = child
    elif child.directory is None:
        # A file already owns this identifier; the node now carries both
        child.directory = directory
    return child


def _find_last_root(normalized: str, root_directory: str) -> Optional[re.Match]:
    """Locate the last '/<root>/' occurrence, overlapping matches included."""
    rx = re.compile("/" + re.escape(root_directory) + "/", re.IGNORECASE)
    last: Optional[re.Match] = None
    pos = 0

    while True:
        match = rx.search(normalized, pos)
        if match is None:
            return last
        last = match
        pos = match.start() + 1
