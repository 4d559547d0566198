from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete run:
1. Validates configuration and resolves the base directory.
2. Detects the input format.
3. Parses the text into paths (tree drawing or flat list).
4. Depth-sorts and classifies the paths.
5. Materializes the plan under the dry-run / overwrite policy.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from mkstruct.core.parsing.classifier import classify_paths
from mkstruct.core.parsing.detector import detect_format
from mkstruct.core.parsing.flat_parser import parse_flat
from mkstruct.core.parsing.tree_parser import parse_tree
from mkstruct.core.pipeline.materializer import materialize
from mkstruct.core.pipeline.validator import validate_config
from mkstruct.domain.constants import FORMAT_EMPTY, FORMAT_TREE
from mkstruct.domain.errors import MaterializationError
from mkstruct.domain.models import ClassifiedPath, MaterializeOptions
from mkstruct.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def build_plan(text: str) -> Tuple[str, List[ClassifiedPath]]:
    """
    Convert raw structure text into a depth-sorted, classified plan.

    Args:
        text: Raw input in tree or flat form.

    Returns:
        Tuple[str, List[ClassifiedPath]]: Detected format and the plan.
    """
    input_format = detect_format(text)
    if input_format == FORMAT_EMPTY:
        return input_format, []

    if input_format == FORMAT_TREE:
        paths = parse_tree(text)
    else:
        paths = parse_flat(text)

    logger.debug(f"Parsed {len(paths)} path(s) from {input_format} input.")
    return input_format, classify_paths(paths)


def run_pipeline(
        text: str,
        config: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Execute the full text-to-filesystem pipeline.

    Args:
        text: Raw structure text, already read from its source.
        config: Configuration dictionary (raw or partial).

    Returns:
        PipelineResult: Object containing status, plan, outcomes and summary.
    """
    logger.debug("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_dir = cfg["base_dir"]
    options = MaterializeOptions(dry_run=cfg["dry_run"], force=cfg["force"])

    # -------------------------------------------------------------------------
    # 2) Parsing & Classification
    # -------------------------------------------------------------------------
    input_format, entries = build_plan(text)

    if not entries:
        logger.info("Nothing to create: input contains no paths.")
        return create_success_result(cfg, input_format, [], [])

    logger.info(
        f"Detected {input_format} input: {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} "
        f"under {base_dir}{' (dry run)' if options.dry_run else ''}."
    )

    # -------------------------------------------------------------------------
    # 3) Materialization
    # -------------------------------------------------------------------------
    try:
        outcomes = materialize(entries, base_dir, options)
    except MaterializationError as e:
        msg = f"Filesystem error: {e}"
        logger.critical(f"{msg} (while processing {e.path})")
        return create_error_result(msg, cfg, input_format, entries, e.outcomes)

    result = create_success_result(cfg, input_format, entries, outcomes)
    logger.debug(f"Pipeline finished: {result.summary}")
    return result
