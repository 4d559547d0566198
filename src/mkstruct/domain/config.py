from __future__ import annotations

"""
Configuration Domain Management.

Builds the session configuration that drives a single run. Values are
never persisted: each invocation starts from these defaults and applies
command-line overrides on top.
"""

import os
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"

CONFIG_KEYS = (
    "base_dir",
    "dry_run",
    "force",
    "color",
    "log_level",
    "log_file",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "base_dir": os.getcwd(),

        # Materialization policy
        "dry_run": False,
        "force": False,

        # Console & Diagnostics
        "color": True,
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": "",
    }
