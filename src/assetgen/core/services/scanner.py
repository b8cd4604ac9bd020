from __future__ import annotations

"""
Asset Discovery Service.

Traverses a project directory and turns every file located beneath the
asset root into an AssetRecord, resolving its per-file options. Also lists
the Python sources inspected by the hardcoded path checker.
"""

import logging
import os
import re
from typing import Dict, Iterable, List, Optional, Sequence

from assetgen.core.analysis.tree_builder import relative_asset_path
from assetgen.core.pipeline.components.filters import (
    matches_any,
    resolve_flatten_extensions,
)
from assetgen.domain.asset_models import AssetRecord
from assetgen.domain.constants import DEFAULT_ROOT_DIRECTORY

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_asset_records(
        input_path: str,
        exclude_rx: List[re.Pattern],
        root_directory: str = DEFAULT_ROOT_DIRECTORY,
        flatten_extensions: bool = True,
        flatten_overrides: Optional[Dict[str, bool]] = None,
) -> Iterable[AssetRecord]:
    """
    Walk the project and yield a record for every asset file.

    Directories and files are visited in sorted order so that the record
    sequence, and everything derived from it, is reproducible.

    Args:
        input_path: Project directory to scan.
        exclude_rx: Compiled patterns for directory and file names to skip.
        root_directory: Name of the asset root directory.
        flatten_extensions: Project-wide flatten-extensions flag.
        flatten_overrides: Per-file glob overrides of the flag.

    Yields:
        AssetRecord: One record per file beneath an asset root.
    """
    logger.debug(f"Discovering assets beneath '{root_directory}' in: {input_path}")

    for file_path in _walk_files(input_path, exclude_rx):
        relative = relative_asset_path(file_path, root_directory)
        if relative is None:
            continue

        flatten = resolve_flatten_extensions(relative, flatten_extensions, flatten_overrides)
        yield AssetRecord(source_path=file_path, flatten_extensions=flatten)


def yield_source_files(
        input_path: str,
        exclude_rx: List[re.Pattern],
        extensions: Sequence[str] = (".py",),
        skip: Sequence[str] = (),
) -> Iterable[str]:
    """
    Walk the project and yield the source files to check for hardcoded paths.

    Args:
        input_path: Project directory to scan.
        exclude_rx: Compiled patterns for directory and file names to skip.
        extensions: Source file extensions to include.
        skip: Absolute paths to leave out (e.g. the generated module).

    Yields:
        str: Absolute file paths.
    """
    skipped = {os.path.normcase(os.path.abspath(p)) for p in skip}

    for file_path in _walk_files(input_path, exclude_rx):
        if os.path.splitext(file_path)[1] not in extensions:
            continue
        if os.path.normcase(file_path) in skipped:
            continue
        yield file_path

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk_files(input_path: str, exclude_rx: List[re.Pattern]) -> Iterable[str]:
    input_path_abs = os.path.abspath(input_path)

    for root, dirs, files in os.walk(input_path_abs):
        # In-place directory pruning to optimize traversal
        dirs[:] = [d for d in dirs if not matches_any(d, exclude_rx)]
        dirs.sort()
        files.sort()

        for file_name in files:
            if matches_any(file_name, exclude_rx):
                continue
            yield os.path.join(root, file_name)
