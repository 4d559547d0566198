from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from mkstruct.domain.constants import APP_NAME, APP_VERSION
from mkstruct.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mkstruct CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog"),
    )

    # --- Input Sources ---
    p.add_argument(
        "file",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.file"),
    )
    p.add_argument(
        "-t", "--text",
        dest="text",
        default=None,
        help=i18n.t("cli.args.text"),
    )
    p.add_argument(
        "-s", "--stdin",
        action="store_true",
        help=i18n.t("cli.args.stdin"),
    )

    # --- Target and Policy ---
    p.add_argument(
        "-C", "--base-dir",
        dest="base_dir",
        default=None,
        help=i18n.t("cli.args.base_dir"),
    )
    p.add_argument(
        "-d", "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )
    p.add_argument(
        "-f", "--force",
        action="store_true",
        help=i18n.t("cli.args.force"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help=i18n.t("cli.args.verbose"),
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        help=i18n.t("cli.args.no_color"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    # --- Output Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--print-plan",
        action="store_true",
        help=i18n.t("cli.args.print_plan"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump_config"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["base_dir"] = args.base_dir
    overrides["log_file"] = args.log_file

    if args.dry_run:
        overrides["dry_run"] = True
    if args.force:
        overrides["force"] = True
    if args.no_color:
        overrides["color"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    return overrides
