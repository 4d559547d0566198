from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared structure texts and configuration dictionaries used across tests.
"""

import io
import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------

class TtyStringIO(io.StringIO):
    """StringIO that reports itself as an interactive terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def tty_stdin() -> TtyStringIO:
    """Standard input with nothing piped into it."""
    return TtyStringIO("")


@pytest.fixture
def canonical_tree() -> str:
    """Tree drawing already in the canonical grammar."""
    return "a\n├── b\n│   └── c.txt\n└── d/"


@pytest.fixture
def heavy_tree() -> str:
    """The same layout drawn with heavy box glyphs."""
    return "a\n┣━━ b\n┃   ┗━━ c.txt\n┗━━ d/"


@pytest.fixture
def tree_command_output() -> str:
    """Verbatim output of the `tree` command, summary line included."""
    return (
        ".\n"
        "├── src\n"
        "│   ├── main.py\n"
        "│   └── utils\n"
        "│       └── helpers.py\n"
        "└── README.md\n"
        "\n"
        "2 directories, 3 files\n"
    )


@pytest.fixture
def mock_config_dict(tmp_path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'mkstruct.domain.config'.
    """
    return {
        "base_dir": str(tmp_path),
        "dry_run": False,
        "force": False,
        "color": False,
        "log_level": "INFO",
        "log_file": "",
    }
