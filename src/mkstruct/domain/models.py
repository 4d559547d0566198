from __future__ import annotations

"""
Structure Plan Data Models.

Defines the transient records that flow through the text-to-path pipeline:
analyzed tree lines, classified paths ready for materialization, the
materialization policy, and per-entry outcomes.
"""

from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# PARSING MODELS
# -----------------------------------------------------------------------------

@dataclass
class ParsedLine:
    """
    One analyzed line of a tree drawing.

    Attributes:
        depth: Nesting level relative to the top of the tree (0 = root).
        name: Trimmed entry name.
        is_last: Whether this is the final sibling at its depth. Filled in by
                 a second pass over all lines.
    """
    depth: int
    name: str
    is_last: bool = False


@dataclass(frozen=True)
class ClassifiedPath:
    """
    A parsed path tagged as file or directory.

    Attributes:
        path: Path with trailing separators removed.
        is_file: True for files, False for directories.
        depth: Number of path components, used as the ordering key.
        source: The path exactly as produced by the parser.
    """
    path: str
    is_file: bool
    depth: int
    source: str = ""

    @property
    def is_directory(self) -> bool:
        return not self.is_file

# -----------------------------------------------------------------------------
# MATERIALIZATION MODELS
# -----------------------------------------------------------------------------

ACTION_CREATED = "created"
ACTION_OVERWRITTEN = "overwritten"
ACTION_EXISTS = "exists"
ACTION_SKIPPED = "skipped"
ACTION_REJECTED = "rejected"
ACTION_PLANNED = "planned"


@dataclass(frozen=True)
class MaterializeOptions:
    """
    Policy knobs for the materializer.

    Attributes:
        dry_run: Log intended actions without touching the filesystem.
        force: Truncate existing files instead of skipping them.
    """
    dry_run: bool = False
    force: bool = False


@dataclass(frozen=True)
class EntryOutcome:
    """Result of materializing a single entry."""
    path: str
    is_file: bool
    action: str
    detail: Optional[str] = None
