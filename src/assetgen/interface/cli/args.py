from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the assetgen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="assetgen",
        description=(
            "Generate a Python module of strongly-typed static asset paths "
            "from the files under a project's asset root."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Project directory to scan (default: current directory).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Generated module path (default: <input>/<class_name_in_snake_case>.py).",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file (default: <input>/assetgen.json when present).",
    )

    # --- Generation Options ---
    p.add_argument(
        "--class-name",
        dest="class_name",
        default=None,
        help="Name of the outermost generated class (default: StaticAssets).",
    )
    p.add_argument(
        "--path-base",
        dest="path_base",
        default=None,
        help="Prefix for every emitted path; '.' emits relative paths (default: /).",
    )
    p.add_argument(
        "--root-dir",
        dest="root_directory",
        default=None,
        help="Name of the asset root directory (default: wwwroot).",
    )
    p.add_argument(
        "--no-flatten-extensions",
        action="store_true",
        help="Strip only the last extension from identifiers (style.min.css -> StyleMin).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes for directory/file names to skip while scanning.",
    )

    # --- Companion Check ---
    p.add_argument(
        "--check",
        action="store_true",
        help="Also report hardcoded asset paths in the project's Python sources.",
    )

    # --- Runtime Constraints ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated module instead of writing it.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Options that were not given map to None and do not override anything.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["class_name"] = args.class_name
    overrides["path_base"] = args.path_base
    overrides["root_directory"] = args.root_directory

    if args.no_flatten_extensions:
        overrides["flatten_extensions"] = False
    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.check:
        overrides["check_hardcoded_paths"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
