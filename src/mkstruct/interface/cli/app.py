from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration merging
and validation, logging bootstrap, input sourcing, pipeline execution, and
result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional, TextIO

from mkstruct.core.pipeline.engine import build_plan, run_pipeline
from mkstruct.core.pipeline.validator import validate_config
from mkstruct.domain.config import CONFIG_KEYS, get_default_config
from mkstruct.domain.errors import InputMissingError, InputReadError
from mkstruct.domain.models import (
    ACTION_CREATED,
    ACTION_EXISTS,
    ACTION_OVERWRITTEN,
    ACTION_PLANNED,
    ACTION_REJECTED,
    ACTION_SKIPPED,
)
from mkstruct.domain.pipeline_models import PipelineResult
from mkstruct.infra.fs import read_structure_input
from mkstruct.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from mkstruct.interface.cli import args as cli_args
from mkstruct.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INPUT_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Optional stream used instead of sys.stdin.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration merging and validation
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        color=clean_conf["color"],
        log_file=clean_conf["log_file"] or None,
    )
    configure_logging(logging_conf, force=True)

    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        if args.dump_config:
            print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
            return EXIT_OK

        try:
            return _execute(args, clean_conf, stdin)
        except KeyboardInterrupt:
            logger.debug("Run interrupted by KeyboardInterrupt.")
            print(i18n.t("cli.status.interrupted"), file=sys.stderr)
            return EXIT_INTERRUPTED
    finally:
        shutdown_logging()


def _execute(args: Any, conf: Dict[str, Any], stdin: Optional[TextIO]) -> int:
    # 4. Input sourcing
    try:
        text = read_structure_input(args.file, use_stdin=args.stdin, text=args.text, stdin=stdin)
    except InputMissingError:
        return _fail(i18n.t("cli.errors.no_input"), EXIT_INPUT_ERROR)
    except InputReadError as e:
        return _fail(i18n.t("cli.errors.read_failed", error=str(e)), EXIT_INPUT_ERROR)

    # Plan preview short-circuit
    if args.print_plan:
        input_format, entries = build_plan(text)
        if args.json_output:
            payload = {"input_format": input_format, "entries": [asdict(e) for e in entries]}
            print(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            for entry in entries:
                print(entry.path if entry.is_file else f"{entry.path}/")
        return EXIT_OK

    # 5. Pipeline execution phase
    result = run_pipeline(text, conf)

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

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
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Format and print the execution result to standard output.

    Args:
        result: The pipeline result to render.
    """
    if not result.entries and result.ok:
        print(i18n.t("cli.status.empty"))
        return

    actions = result.summary.get("actions", {})
    counts = {
        "created": actions.get(ACTION_CREATED, 0) + actions.get(ACTION_OVERWRITTEN, 0),
        "planned": actions.get(ACTION_PLANNED, 0),
        "exists": actions.get(ACTION_EXISTS, 0),
        "skipped": actions.get(ACTION_SKIPPED, 0),
        "rejected": actions.get(ACTION_REJECTED, 0),
    }

    key = "cli.status.dry_run_summary" if result.dry_run else "cli.status.summary"
    print(i18n.t(key, **counts))

    if result.rejected:
        print(
            "ERROR: " + i18n.t("cli.errors.rejected", count=len(result.rejected), base_dir=result.base_dir),
            file=sys.stderr,
        )
    elif not result.ok:
        print("ERROR: " + i18n.t("cli.errors.pipeline_fail", error=result.error), file=sys.stderr)


def _fail(msg: str, code: int) -> int:
    logger.debug(f"Exiting with code {code}: {msg}")
    print(f"ERROR: {msg}", file=sys.stderr)
    return code

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
