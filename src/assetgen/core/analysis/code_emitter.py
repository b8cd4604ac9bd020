from __future__ import annotations

"""
Asset Module Emitter.

Renders a collision-free asset tree into the source of a Python module:
every group becomes a nested class that cannot be instantiated and every
file becomes a 'Final' string constant holding its web path. The layout is
fixed so that unchanged input always yields byte-identical output.
"""

import json
import re
from typing import List

from assetgen.domain.asset_models import AssetNode
from assetgen.domain.constants import DEFAULT_PATH_BASE, GENERATED_MARKER

INDENT = "    "

_MODULE_PREAMBLE: List[str] = [
    GENERATED_MARKER,
    "# This file is generated by assetgen. Do not edit it by hand.",
    "",
    "from __future__ import annotations",
    "",
    "from typing import Final, NoReturn",
    "",
    "",
    "class _AssetGroup:",
    '    """Base of every generated asset group. Groups are never instantiated."""',
    "",
    "    __slots__ = ()",
    "",
    "    def __new__(cls, *args: object, **kwargs: object) -> NoReturn:",
    '        raise TypeError(f"{cls.__name__} is a static asset group and cannot be instantiated")',
    "",
    "",
]

_ROOT_DOCSTRING = '"""Provides strongly-typed access to static asset paths."""'

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def emit_module(tree: AssetNode, path_base: str = DEFAULT_PATH_BASE) -> str:
    """
    Render the complete module source for an asset tree.

    Must only be called when the collision detector found nothing: each
    leaf is rendered from its first source path.

    Args:
        tree: Root node; its name becomes the outermost class name.
        path_base: Prefix applied to every web path ('.' for relative paths).

    Returns:
        str: Module source ending with a single newline.
    """
    lines: List[str] = list(_MODULE_PREAMBLE)
    render_group(tree, lines, depth=0, path_base=path_base)

    while lines and lines[-1] == "":
        lines.pop()

    return "\n".join(lines) + "\n"


def render_group(node: AssetNode, lines: List[str], depth: int, path_base: str) -> None:
    """
    Recursively append the class for a group and all of its children.

    Leaves are rendered before sub-groups; both are sorted ordinally by
    identifier. Every constant is followed by one blank line and every
    nested class is followed by exactly one blank line.

    Args:
        node: Group node to render.
        lines: Accumulator of output lines.
        depth: Nesting level (0 for the root class).
        path_base: Prefix applied to every web path.
    """
    indent = INDENT * depth
    inner = indent + INDENT

    lines.append(f"{indent}class {node.name}(_AssetGroup):")

    leaves = node.leaves()
    groups = node.groups()

    if depth == 0:
        lines.append(f"{inner}{_ROOT_DOCSTRING}")
        lines.append("")
    elif not leaves and not groups:
        lines.append(f"{inner}pass")
        lines.append("")

    for leaf in leaves:
        web_path = build_web_path(leaf.relative_path or "", path_base)
        lines.append(f"{inner}#: Path: {_escape(web_path)}")
        lines.append(f"{inner}{leaf.name}: Final = {_literal(web_path)}")
        lines.append("")

    for group in groups:
        render_group(group, lines, depth + 1, path_base)
        if lines[-1] != "":
            lines.append("")


def build_web_path(relative_path: str, path_base: str = DEFAULT_PATH_BASE) -> str:
    """
    Join a path base and an asset-root-relative path.

    A base of '.' yields the bare relative path. Any other base is joined
    with exactly one slash, however the caller wrote its trailing slash.

    Examples:
        build_web_path("images/logo.png", "/admin/v3/") -> "/admin/v3/images/logo.png"
        build_web_path("images/logo.png", ".")          -> "images/logo.png"
    """
    relative = relative_path.lstrip("/")
    if path_base == ".":
        return relative
    return path_base.rstrip("/") + "/" + relative


def module_file_name(class_name: str) -> str:
    """Derive the generated module file name: 'StaticAssets' -> 'static_assets.py'."""
    snake = re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", "_", class_name).lower()
    return f"{snake}.py"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _literal(value: str) -> str:
    """JSON string escaping is also valid Python literal syntax."""
    return json.dumps(value, ensure_ascii=False)


def _escape(value: str) -> str:
    """Escape control characters so a path cannot break a comment line."""
    return _literal(value)[1:-1]
