from __future__ import annotations

"""
Diagnostic Domain Models.

Defines the structured messages attached to a generation run: duplicate
identifier errors from the tree analysis and hardcoded path warnings from
the source checker.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from assetgen.domain.constants import (
    DUPLICATE_KEY_CODE,
    DUPLICATE_KEY_MESSAGE,
    HARDCODED_PATH_CODE,
    HARDCODED_PATH_MESSAGE,
)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single reportable finding.

    Attributes:
        code: Stable diagnostic identifier (e.g. ASSET001).
        severity: 'error' blocks the build, 'warning' never does.
        message: Human-readable description.
        path: File the finding refers to, if any.
        line: 1-based line number, if known.
        column: 1-based column number, if known.
    """
    code: str
    severity: str
    message: str
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return self.severity == SEVERITY_ERROR

    def format(self) -> str:
        """Render in the 'path:line:col: CODE message' style of linters."""
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}:{self.column or 1}: {self.code} {self.message}"
        return f"{self.severity} {self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "severity": self.severity,
            "message": self.message,
            "path": self.path,
            "line": self.line,
            "column": self.column,
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def duplicate_key_error(key: str, path: str) -> Diagnostic:
    """Build the error reported for one file of a duplicate identifier group."""
    return Diagnostic(
        code=DUPLICATE_KEY_CODE,
        severity=SEVERITY_ERROR,
        message=DUPLICATE_KEY_MESSAGE.format(key=key, path=path),
        path=path,
    )


def hardcoded_path_warning(
        value: str,
        class_name: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
) -> Diagnostic:
    """Build the warning reported for one asset-looking string literal."""
    return Diagnostic(
        code=HARDCODED_PATH_CODE,
        severity=SEVERITY_WARNING,
        message=HARDCODED_PATH_MESSAGE.format(value=value, class_name=class_name),
        path=path,
        line=line,
        column=column,
    )


def has_errors(diagnostics: List[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)
