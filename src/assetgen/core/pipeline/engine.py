from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the generation workflow:
1. Validates configuration and paths.
2. Discovers asset files beneath the asset root.
3. Builds the asset tree and detects identifier collisions.
4. Emits the module, or blocks generation with one error per conflict.
5. Optionally checks project sources for hardcoded asset paths.
6. Writes the module only when its content changed.

'generate_assets' is the pure core (records in, result out) and keeps no
state between calls, so independent runs can execute concurrently.
"""

import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from assetgen.core.analysis.code_emitter import emit_module, module_file_name
from assetgen.core.analysis.collisions import collision_diagnostics, detect_collisions
from assetgen.core.analysis.hardcoded_paths import check_files
from assetgen.core.analysis.identifiers import UNICODE_VERSION
from assetgen.core.analysis.tree_builder import build_asset_tree, filter_asset_records
from assetgen.core.pipeline.components.filters import compile_patterns
from assetgen.core.pipeline.stages.validator import validate_config
from assetgen.core.services.scanner import yield_asset_records, yield_source_files
from assetgen.domain.asset_models import AssetRecord
from assetgen.domain.constants import (
    DEFAULT_CLASS_NAME,
    DEFAULT_PATH_BASE,
    DEFAULT_ROOT_DIRECTORY,
)
from assetgen.domain.diagnostics import Diagnostic
from assetgen.domain.pipeline_models import (
    GenerationResult,
    PipelineResult,
    create_error_result,
    create_success_result,
)
from assetgen.infra.fs import normalize_path, resolve_output_path, write_if_changed

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PURE GENERATION CORE
# -----------------------------------------------------------------------------

def generate_assets(
        records: Iterable[AssetRecord],
        *,
        class_name: str = DEFAULT_CLASS_NAME,
        path_base: str = DEFAULT_PATH_BASE,
        root_directory: str = DEFAULT_ROOT_DIRECTORY,
) -> GenerationResult:
    """
    Run build -> detect -> emit over a set of asset records.

    Never raises over its input domain:
    - no record beneath the asset root: ok, no output, no diagnostics;
    - any identifier collision anywhere: not ok, no output, one error
      diagnostic per conflicting source, for every duplicate group;
    - otherwise: ok, with the module source.

    Args:
        records: Asset records, processed in the given order.
        class_name: Name of the outermost generated class.
        path_base: Prefix applied to every web path ('.' for relative paths).
        root_directory: Asset root directory name.

    Returns:
        GenerationResult: The immutable outcome of the run.
    """
    assets = filter_asset_records(records, root_directory)
    if not assets:
        logger.info(f"No assets found beneath '{root_directory}'. Nothing to generate.")
        return GenerationResult(ok=True, class_name=class_name)

    tree = build_asset_tree(assets, class_name, root_directory)
    if not tree.children:
        logger.info("Asset root contains no files. Nothing to generate.")
        return GenerationResult(ok=True, class_name=class_name, asset_count=len(assets))

    collisions = detect_collisions(tree)
    if collisions:
        diagnostics = collision_diagnostics(collisions)
        for diagnostic in diagnostics:
            logger.error(diagnostic.format())
        logger.error(
            f"Generation blocked: {len(collisions)} duplicate asset key(s) "
            f"across {len(diagnostics)} file(s)."
        )
        return GenerationResult(
            ok=False,
            class_name=class_name,
            asset_count=len(assets),
            duplicates=collisions,
            diagnostics=diagnostics,
        )

    source = emit_module(tree, path_base)
    logger.debug(f"Generated {class_name} for {len(assets)} asset(s).")

    return GenerationResult(
        ok=True,
        class_name=class_name,
        source_name=module_file_name(class_name),
        source=source,
        asset_count=len(assets),
    )


# -----------------------------------------------------------------------------
# BUILD ADAPTER PIPELINE
# -----------------------------------------------------------------------------

def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> PipelineResult:
    """
    Execute the full generation pipeline over a project directory.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, generate and check without writing to disk.

    Returns:
        PipelineResult: Object containing status, diagnostics and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_path = normalize_path(cfg.get("input_path", ""), os.getcwd())

    if not os.path.isdir(input_path):
        msg = f"Invalid input directory: {input_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path, dry_run=dry_run)

    output_path = resolve_output_path(
        cfg["output_path"], input_path, module_file_name(cfg["class_name"])
    )
    exclude_rx = compile_patterns(cfg["exclude_patterns"])

    # -------------------------------------------------------------------------
    # 2) Discovery
    # -------------------------------------------------------------------------
    records = list(
        yield_asset_records(
            input_path,
            exclude_rx,
            root_directory=cfg["root_directory"],
            flatten_extensions=cfg["flatten_extensions"],
            flatten_overrides=cfg["flatten_overrides"],
        )
    )
    logger.debug(f"Discovered {len(records)} asset file(s).")

    # -------------------------------------------------------------------------
    # 3) Generation
    # -------------------------------------------------------------------------
    generation = generate_assets(
        records,
        class_name=cfg["class_name"],
        path_base=cfg["path_base"],
        root_directory=cfg["root_directory"],
    )
    diagnostics: List[Diagnostic] = list(generation.diagnostics)

    # -------------------------------------------------------------------------
    # 4) Companion Check
    # -------------------------------------------------------------------------
    checked_files = 0
    if cfg["check_hardcoded_paths"]:
        sources = list(yield_source_files(input_path, exclude_rx, skip=[output_path]))
        checked_files = len(sources)
        warnings_found = check_files(sources, cfg["class_name"])
        for diagnostic in warnings_found:
            logger.warning(diagnostic.format())
        diagnostics.extend(warnings_found)

    summary = {
        "assets": generation.asset_count,
        "duplicate_keys": sorted(generation.duplicates),
        "checked_files": checked_files,
        "unicode_version": UNICODE_VERSION,
    }

    if not generation.ok:
        return create_error_result(
            f"Duplicate asset keys detected: {', '.join(generation.duplicates)}",
            cfg, input_path, output_path,
            diagnostics=diagnostics,
            asset_count=generation.asset_count,
            dry_run=dry_run,
            summary_extra=summary,
        )

    # -------------------------------------------------------------------------
    # 5) Deployment
    # -------------------------------------------------------------------------
    written = False
    if generation.has_output and not dry_run:
        try:
            written = write_if_changed(output_path, generation.source)
        except OSError as e:
            msg = f"Failed to write generated module {output_path}: {e}"
            logger.critical(msg)
            return create_error_result(
                msg, cfg, input_path, output_path,
                diagnostics=diagnostics,
                asset_count=generation.asset_count,
                dry_run=dry_run,
                summary_extra=summary,
            )

        if written:
            logger.info(f"Generated module written to: {output_path}")
        else:
            logger.info(f"Generated module is up to date: {output_path}")

    logger.info("Pipeline execution finished.")

    return create_success_result(
        cfg,
        input_path,
        output_path if generation.has_output else "",
        written=written,
        asset_count=generation.asset_count,
        source=generation.source,
        diagnostics=diagnostics,
        dry_run=dry_run,
        summary_extra=summary,
    )
