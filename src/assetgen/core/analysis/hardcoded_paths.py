from __future__ import annotations

"""
Hardcoded Asset Path Checker.

Scans Python sources through the Abstract Syntax Tree (AST) module and flags
string literals that still spell out static asset paths ('/images/logo.png')
instead of going through the generated asset classes. Findings are warnings:
they never block generation.
"""

import ast
import logging
from typing import Iterable, List, Optional, Sequence

from assetgen.domain.constants import (
    ASSET_DIRECTORY_PREFIXES,
    ASSET_EXTENSIONS,
    ASSET_GROUP_NAMES,
    DEFAULT_CLASS_NAME,
    EQUALITY_ASSERTION_CALLS,
)
from assetgen.domain.diagnostics import Diagnostic, hardcoded_path_warning

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def check_files(
        file_paths: Iterable[str],
        class_name: str = DEFAULT_CLASS_NAME,
) -> List[Diagnostic]:
    """
    Run the hardcoded path check over several source files.

    Args:
        file_paths: Python source files to inspect.
        class_name: Name of the generated root class, used in messages and
            to recognize literals already routed through it.

    Returns:
        List[Diagnostic]: Warnings in file order, then source order.
    """
    diagnostics: List[Diagnostic] = []
    for path in file_paths:
        diagnostics.extend(check_file(path, class_name))
    return diagnostics


def check_file(file_path: str, class_name: str = DEFAULT_CLASS_NAME) -> List[Diagnostic]:
    """Read and check a single file; unreadable files are logged and skipped."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read '{file_path}' for path checking: {e}")
        return []

    return check_source(source, filename=file_path, class_name=class_name)


def check_source(
        source: str,
        filename: str = "<string>",
        class_name: str = DEFAULT_CLASS_NAME,
) -> List[Diagnostic]:
    """
    Report every asset-looking string literal in a piece of Python source.

    Generated modules (first line carries 'auto-generated') and sources with
    syntax errors produce no findings.

    Args:
        source: Python source text.
        filename: Name used in the diagnostics.
        class_name: Name of the generated root class.

    Returns:
        List[Diagnostic]: One warning per offending literal.
    """
    if _is_generated(source):
        return []

    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as e:
        logger.debug(f"Skipping '{filename}': invalid syntax ({e.msg}, line {e.lineno})")
        return []
    except ValueError as e:
        logger.debug(f"Skipping '{filename}': {e}")
        return []

    group_names = tuple(dict.fromkeys((class_name,) + ASSET_GROUP_NAMES))
    visitor = _HardcodedPathVisitor(filename, class_name, group_names)
    visitor.visit(tree)
    return visitor.diagnostics


def looks_like_asset_path(value: str) -> bool:
    """
    Decide whether a string resembles a rooted static asset path.

    The value must start with '/' and either start with a conventional
    asset directory or end with a common asset extension (case-insensitive).
    """
    if not value or not value.startswith("/"):
        return False

    lowered = value.lower()
    return lowered.startswith(ASSET_DIRECTORY_PREFIXES) or lowered.endswith(ASSET_EXTENSIONS)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

class _HardcodedPathVisitor(ast.NodeVisitor):
    """
    AST visitor that keeps the chain of ancestors of the current node.

    Skips:
    - Interpolated strings (f-strings) and templated values ('{', '$').
    - Bare string statements (docstrings).
    - Values of 'Final' annotated assignments (constant declarations).
    - Assert statements and equality-assertion calls.
    - Literals used through an attribute, call or subscript rooted at an
      asset group name (e.g. StaticAssets.resolve("/images/a.png")).
    """

    def __init__(self, filename: str, class_name: str, group_names: Sequence[str]):
        self.filename = filename
        self.class_name = class_name
        self.group_names = group_names
        self.diagnostics: List[Diagnostic] = []
        self._stack: List[ast.AST] = []

    def generic_visit(self, node: ast.AST) -> None:
        self._stack.append(node)
        super().generic_visit(node)
        self._stack.pop()

    def visit_JoinedStr(self, node: ast.JoinedStr) -> None:
        return

    def visit_Assert(self, node: ast.Assert) -> None:
        return

    def visit_Expr(self, node: ast.Expr) -> None:
        if isinstance(node.value, ast.Constant) and isinstance(node.value.value, str):
            return
        self.generic_visit(node)

    def visit_AnnAssign(self, node: ast.AnnAssign) -> None:
        if _is_final_annotation(node.annotation):
            return
        self.generic_visit(node)

    def visit_Constant(self, node: ast.Constant) -> None:
        value = node.value
        if not isinstance(value, str) or not looks_like_asset_path(value):
            return
        if "{" in value or "$" in value:
            return
        if self._in_asset_group_context():
            return

        self.diagnostics.append(
            hardcoded_path_warning(
                value,
                self.class_name,
                path=self.filename,
                line=node.lineno,
                column=node.col_offset + 1,
            )
        )

    def _in_asset_group_context(self) -> bool:
        for ancestor in reversed(self._stack):
            if isinstance(ancestor, ast.Call):
                if _called_name(ancestor.func) in EQUALITY_ASSERTION_CALLS:
                    return True
                if self._is_group_rooted(_dotted_name(ancestor.func)):
                    return True
            elif isinstance(ancestor, (ast.Attribute, ast.Subscript)):
                if self._is_group_rooted(_dotted_name(ancestor.value)):
                    return True
        return False

    def _is_group_rooted(self, dotted: str) -> bool:
        root = dotted.split(".", 1)[0]
        return bool(root) and any(name in root for name in self.group_names)


def _dotted_name(node: ast.AST) -> str:
    """Resolve 'a.b.c' for Name/Attribute chains; empty for anything else."""
    parts: List[str] = []
    current: Optional[ast.AST] = node
    while isinstance(current, ast.Attribute):
        parts.append(current.attr)
        current = current.value
    if not isinstance(current, ast.Name):
        return ""
    parts.append(current.id)
    return ".".join(reversed(parts))


def _called_name(func: ast.AST) -> str:
    """Last name of a call target: 'b' for a.b(), x().b() and b()."""
    if isinstance(func, ast.Attribute):
        return func.attr
    if isinstance(func, ast.Name):
        return func.id
    return ""


def _is_final_annotation(annotation: ast.AST) -> bool:
    """Match 'Final', 'typing.Final' and their subscripted forms."""
    if isinstance(annotation, ast.Subscript):
        annotation = annotation.value
    return _dotted_name(annotation).rsplit(".", 1)[-1] == "Final"


def _is_generated(source: str) -> bool:
    first_line = source.split("\n", 1)[0]
    return "auto-generated" in first_line
