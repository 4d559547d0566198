from __future__ import annotations

"""
Structure Materializer.

Creates the classified plan on disk, one entry at a time and in plan
order. Every entry is guarded against escaping the base directory; a
rejected entry is reported and the run moves on to the next one.
Existing files are skipped unless overwriting is forced, and dry runs only
log what would happen.
"""

import logging
import os
from typing import List, Set

from mkstruct.domain.errors import MaterializationError, PathEscapesRootError
from mkstruct.domain.models import (
    ACTION_CREATED,
    ACTION_EXISTS,
    ACTION_OVERWRITTEN,
    ACTION_PLANNED,
    ACTION_REJECTED,
    ACTION_SKIPPED,
    ClassifiedPath,
    EntryOutcome,
    MaterializeOptions,
)
from mkstruct.infra.fs import display_path, make_dirs, resolve_within_root, write_empty_file

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        entries: List[ClassifiedPath],
        base_dir: str,
        options: MaterializeOptions,
) -> List[EntryOutcome]:
    """
    Create every planned entry under base_dir.

    Args:
        entries: Depth-sorted, classified plan.
        base_dir: Absolute directory the plan is relative to.
        options: Dry-run and overwrite policy.

    Returns:
        List[EntryOutcome]: One record per entry, in plan order.

    Raises:
        MaterializationError: On unexpected filesystem failures. The run stops
                              there and the error carries the outcomes so far.
    """
    outcomes: List[EntryOutcome] = []
    planned_dirs: Set[str] = set()

    for entry in entries:
        try:
            full_path = resolve_within_root(base_dir, entry.path)
        except PathEscapesRootError as e:
            logger.error(str(e))
            outcomes.append(EntryOutcome(entry.path, entry.is_file, ACTION_REJECTED, str(e)))
            continue

        try:
            if entry.is_file:
                outcome = _create_file(entry, full_path, base_dir, options, planned_dirs)
            else:
                outcome = _create_dir(entry, full_path, base_dir, options, planned_dirs)
        except OSError as e:
            raise MaterializationError(entry.path, e, outcomes) from e
        outcomes.append(outcome)

    return outcomes


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_dir(full_path: str, base_dir: str, dry_run: bool, planned_dirs: Set[str]) -> bool:
    """Create a directory chain if missing. Returns True if it was (or would be) created."""
    if os.path.isdir(full_path) or full_path in planned_dirs:
        return False

    rel = display_path(full_path, base_dir)
    if dry_run:
        planned_dirs.add(full_path)
        logger.info(f"[DRY] mkdir: {rel}")
    else:
        make_dirs(full_path)
        logger.info(f"Created folder: {rel}")
    return True


def _create_dir(
        entry: ClassifiedPath,
        full_path: str,
        base_dir: str,
        options: MaterializeOptions,
        planned_dirs: Set[str],
) -> EntryOutcome:
    if os.path.exists(full_path) and not os.path.isdir(full_path):
        msg = "a file with this name already exists"
        logger.warning(f"Skipped folder ({msg}): {entry.path}")
        return EntryOutcome(entry.path, False, ACTION_SKIPPED, msg)

    if full_path in planned_dirs:
        return EntryOutcome(entry.path, False, ACTION_PLANNED)

    if not _ensure_dir(full_path, base_dir, options.dry_run, planned_dirs):
        logger.debug(f"Folder already exists: {entry.path}")
        return EntryOutcome(entry.path, False, ACTION_EXISTS)

    return EntryOutcome(entry.path, False, ACTION_PLANNED if options.dry_run else ACTION_CREATED)


def _create_file(
        entry: ClassifiedPath,
        full_path: str,
        base_dir: str,
        options: MaterializeOptions,
        planned_dirs: Set[str],
) -> EntryOutcome:
    if os.path.isdir(full_path):
        msg = "a folder with this name already exists"
        logger.warning(f"Skipped file ({msg}): {entry.path}")
        return EntryOutcome(entry.path, True, ACTION_SKIPPED, msg)

    parent = os.path.dirname(full_path)
    if parent and os.path.exists(parent) and not os.path.isdir(parent):
        msg = "its parent is a file"
        logger.warning(f"Skipped file ({msg}): {entry.path}")
        return EntryOutcome(entry.path, True, ACTION_SKIPPED, msg)
    _ensure_dir(parent, base_dir, options.dry_run, planned_dirs)

    exists = os.path.exists(full_path)
    if exists and not options.force:
        logger.warning(f"Skipped (exists): {entry.path}")
        return EntryOutcome(entry.path, True, ACTION_SKIPPED, "already exists")

    if options.dry_run:
        verb = "overwrite file" if exists else "create file"
        logger.info(f"[DRY] {verb}: {entry.path}")
        return EntryOutcome(entry.path, True, ACTION_PLANNED)

    write_empty_file(full_path, overwrite=options.force)
    if exists:
        logger.info(f"Overwrote file: {entry.path}")
        return EntryOutcome(entry.path, True, ACTION_OVERWRITTEN)

    logger.info(f"Created file: {entry.path}")
    return EntryOutcome(entry.path, True, ACTION_CREATED)
