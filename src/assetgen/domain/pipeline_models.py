from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structures exchanged between the generation engine,
the build adapter and the CLI, plus the factory functions that build them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from assetgen.domain.diagnostics import Diagnostic

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one build -> detect -> emit run over an asset set.

    Attributes:
        ok: False when duplicate identifiers blocked generation.
        class_name: Name of the outermost generated class.
        source_name: File name of the generated module ('' when nothing
            was generated).
        source: Generated module text ('' when nothing was generated).
        asset_count: Number of records located beneath the asset root.
        duplicates: Fully-qualified key -> conflicting sources.
        diagnostics: Error diagnostics, one per conflicting source.
    """
    ok: bool
    class_name: str
    source_name: str = ""
    source: str = ""
    asset_count: int = 0
    duplicates: Dict[str, List[str]] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def has_output(self) -> bool:
        return bool(self.source)


@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete adapter run (scan, generate, write).

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized project directory that was scanned.
        output_path: Destination of the generated module.
        class_name: Name of the outermost generated class.
        path_base: Prefix applied to emitted paths.
        root_directory: Asset root directory name.
        dry_run: Whether writing to disk was skipped.
        written: Whether the module file was (re)written during this run.
        asset_count: Number of discovered asset files.
        source: Generated module text.
        diagnostics: Errors and warnings gathered during the run.
        summary: Technical execution summary and statistics.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str
    class_name: str
    path_base: str
    root_directory: str

    dry_run: bool = False
    written: bool = False
    asset_count: int = 0
    source: str = ""
    diagnostics: List[Diagnostic] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if not d.is_error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "error": self.error,
            "input_path": self.input_path,
            "output_path": self.output_path,
            "class_name": self.class_name,
            "path_base": self.path_base,
            "root_directory": self.root_directory,
            "dry_run": self.dry_run,
            "written": self.written,
            "asset_count": self.asset_count,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "summary": dict(self.summary),
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str = "",
        diagnostics: Optional[List[Diagnostic]] = None,
        asset_count: int = 0,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        input_path: The scanned project directory.
        output_path: Calculated module destination.
        diagnostics: Diagnostics explaining the failure.
        asset_count: Number of assets discovered before failing.
        dry_run: Whether writing to disk was skipped.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        input_path=input_path,
        output_path=output_path,
        class_name=cfg.get("class_name", ""),
        path_base=cfg.get("path_base", ""),
        root_directory=cfg.get("root_directory", ""),
        dry_run=dry_run,
        written=False,
        asset_count=asset_count,
        diagnostics=diagnostics or [],
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str,
        written: bool,
        asset_count: int,
        source: str = "",
        diagnostics: Optional[List[Diagnostic]] = None,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        input_path: Normalized project directory.
        output_path: Destination of the generated module.
        written: Whether the module file changed on disk.
        asset_count: Number of discovered asset files.
        source: Generated module text.
        diagnostics: Non-blocking warnings.
        dry_run: Whether writing to disk was skipped.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        class_name=cfg.get("class_name", ""),
        path_base=cfg.get("path_base", ""),
        root_directory=cfg.get("root_directory", ""),
        dry_run=dry_run,
        written=written,
        asset_count=asset_count,
        source=source,
        diagnostics=diagnostics or [],
        summary=summary_extra or {},
    )
