from __future__ import annotations

"""
File Filtering Engine.

Implements regex-based exclusion of directory and file names during project
scanning and glob-based resolution of per-file generation options.
"""

import fnmatch
import re
from typing import Dict, List, Optional

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed regex strings are discarded so a bad configuration entry
    cannot abort the scan.

    Args:
        patterns: List of raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a string matches at least one compiled regex pattern.

    Args:
        name: Filename or directory name to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found, False otherwise.
    """
    return any(rx.search(name) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# PER-FILE OPTIONS
# -----------------------------------------------------------------------------

def resolve_flatten_extensions(
        relative_path: str,
        default: bool = True,
        overrides: Optional[Dict[str, bool]] = None,
) -> bool:
    """
    Resolve the flatten-extensions flag for one asset.

    Override keys are glob patterns matched case-sensitively against the
    asset-root-relative path, one '/'-separated segment at a time: '*' stays
    within a segment ('css/*.min.css' does not reach 'css/vendor/x.min.css')
    and a '**' segment spans any number of directories. When several match,
    the last one in the mapping wins.

    Args:
        relative_path: Path of the asset relative to the asset root.
        default: Project-wide flag.
        overrides: Ordered mapping of glob pattern -> flag.

    Returns:
        bool: The effective flag.
    """
    flag = default
    for pattern, value in (overrides or {}).items():
        if match_glob(relative_path, pattern):
            flag = value
    return flag


def match_glob(relative_path: str, pattern: str) -> bool:
    """
    Match a '/'-separated path against a glob, segment by segment.

    Examples:
        match_glob("css/site.min.css", "css/*.min.css")       -> True
        match_glob("css/vendor/x.min.css", "css/*.min.css")   -> False
        match_glob("css/vendor/x.min.css", "css/**/*.min.css") -> True
    """
    return _match_segments(relative_path.split("/"), pattern.split("/"))


def _match_segments(parts: List[str], patterns: List[str]) -> bool:
    if not patterns:
        return not parts

    head, rest = patterns[0], patterns[1:]
    if head == "**":
        return any(_match_segments(parts[i:], rest) for i in range(len(parts) + 1))

    return bool(parts) and fnmatch.fnmatchcase(parts[0], head) and _match_segments(parts[1:], rest)
