from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, project file and CLI overrides),
pipeline execution and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from assetgen.core.pipeline.engine import run_pipeline
from assetgen.core.pipeline.stages.validator import validate_config
from assetgen.domain.config import find_config_file, load_config
from assetgen.domain.pipeline_models import PipelineResult
from assetgen.infra.fs import normalize_path
from assetgen.infra.logging import LoggingConfig, configure_logging, get_logger
from assetgen.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Exit codes: 0 on success (warnings included), 1 when duplicate asset
    keys block generation or the pipeline fails, 2 for an invalid input
    directory, 130 when interrupted.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file),
        force=True,
    )

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Defaults vs project file)
    overrides = cli_args.args_to_overrides(args)
    input_path = normalize_path(overrides.get("input_path"), os.getcwd())
    config_path = args.config_path or find_config_file(input_path)
    base_conf = load_config(config_path)

    # Relative paths in a project file refer to the project directory
    if base_conf.get("output_path") and not os.path.isabs(base_conf["output_path"]):
        base_conf["output_path"] = os.path.join(input_path, base_conf["output_path"])

    # 4. Merge command-line overrides
    raw_conf = _merge_config(base_conf, overrides)
    raw_conf["input_path"] = input_path

    # 5. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 6. Pre-flight input verification
    if not os.path.isdir(input_path):
        msg = f"Input directory does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 7. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 8. Output rendering phase
    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    elif args.dry_run and result.ok and result.source:
        sys.stdout.write(result.source)
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "input_path", "output_path", "class_name", "path_base", "root_directory",
        "flatten_extensions", "exclude_patterns", "check_hardcoded_paths",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Format and print the execution result.

    Diagnostics go to stderr in 'path:line:col: CODE message' form; the
    status report goes to stdout.

    Args:
        result: The pipeline result to render.
    """
    for diagnostic in result.diagnostics:
        print(diagnostic.format(), file=sys.stderr)

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.asset_count == 0:
        print(f"No assets found under '{result.root_directory}'. Nothing generated.")
    elif result.dry_run:
        print(f"Dry run: {result.asset_count} asset(s), target {result.output_path}")
    elif result.written:
        print(f"Generated {result.class_name} ({result.asset_count} assets): {result.output_path}")
    else:
        print(f"{result.class_name} is up to date ({result.asset_count} assets): {result.output_path}")

    if result.summary.get("checked_files"):
        print(
            f"Checked {result.summary['checked_files']} source file(s): "
            f"{result.warning_count} hardcoded path(s)"
        )

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
