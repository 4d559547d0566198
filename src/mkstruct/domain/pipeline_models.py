from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object and factory functions used to communicate
execution results between the pipeline engine and the CLI layer.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from mkstruct.domain.models import ACTION_REJECTED, ClassifiedPath, EntryOutcome

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_format: Detected input format ('tree', 'flat' or 'empty').
        base_dir: Absolute directory the structure was created under.
        dry_run: Whether the run was simulated.
        force: Whether existing files were overwritten.
        entries: Depth-sorted, classified plan.
        outcomes: Per-entry materialization records, in plan order.
        summary: Counts per outcome action plus totals.
    """
    ok: bool
    error: str

    input_format: str
    base_dir: str
    dry_run: bool
    force: bool

    entries: List[ClassifiedPath] = field(default_factory=list)
    outcomes: List[EntryOutcome] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def rejected(self) -> List[EntryOutcome]:
        return [o for o in self.outcomes if o.action == ACTION_REJECTED]

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def build_summary(
        entries: List[ClassifiedPath],
        outcomes: List[EntryOutcome],
) -> Dict[str, Any]:
    """
    Aggregate outcome actions into a flat statistics dictionary.

    Args:
        entries: The classified plan.
        outcomes: Materialization records.

    Returns:
        Dict[str, Any]: Totals and per-action counters.
    """
    counts = Counter(o.action for o in outcomes)
    return {
        "total": len(entries),
        "files": sum(1 for e in entries if e.is_file),
        "directories": sum(1 for e in entries if e.is_directory),
        "actions": dict(counts),
    }


def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_format: str = "",
        entries: Optional[List[ClassifiedPath]] = None,
        outcomes: Optional[List[EntryOutcome]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        input_format: Detected input format, if detection ran.
        entries: Plan computed before the failure.
        outcomes: Entries processed before the failure.

    Returns:
        PipelineResult: An immutable error result object.
    """
    entries = entries or []
    outcomes = outcomes or []
    return PipelineResult(
        ok=False,
        error=error,
        input_format=input_format,
        base_dir=cfg.get("base_dir", ""),
        dry_run=cfg.get("dry_run", False),
        force=cfg.get("force", False),
        entries=entries,
        outcomes=outcomes,
        summary=build_summary(entries, outcomes),
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_format: str,
        entries: List[ClassifiedPath],
        outcomes: List[EntryOutcome],
) -> PipelineResult:
    """
    Create a pipeline result for a completed run.

    A run that rejected at least one entry still completes, but is not ok.
    """
    rejected = [o for o in outcomes if o.action == ACTION_REJECTED]
    error = ""
    if rejected:
        error = f"{len(rejected)} entr{'y' if len(rejected) == 1 else 'ies'} rejected outside base directory."

    return PipelineResult(
        ok=not rejected,
        error=error,
        input_format=input_format,
        base_dir=cfg.get("base_dir", ""),
        dry_run=cfg.get("dry_run", False),
        force=cfg.get("force", False),
        entries=entries,
        outcomes=outcomes,
        summary=build_summary(entries, outcomes),
    )
