from __future__ import annotations

"""
Unit tests for Domain Data Models.

Verifies immutability of plan records, summary aggregation, and the
ok/error semantics of the pipeline result factories.
"""

import dataclasses

import pytest

from mkstruct.domain.models import (
    ACTION_CREATED,
    ACTION_EXISTS,
    ACTION_REJECTED,
    ClassifiedPath,
    EntryOutcome,
    MaterializeOptions,
    ParsedLine,
)
from mkstruct.domain.pipeline_models import (
    build_summary,
    create_error_result,
    create_success_result,
)


@pytest.fixture
def plan():
    return [
        ClassifiedPath(path="a", is_file=False, depth=1),
        ClassifiedPath(path="a/b.txt", is_file=True, depth=2),
    ]


def test_classified_path_is_frozen() -> None:
    """TC-01: Plan entries cannot be mutated after classification."""
    entry = ClassifiedPath(path="src", is_file=False, depth=1)
    assert entry.is_directory
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.path = "other"  # type: ignore[misc]


def test_parsed_line_defaults() -> None:
    line = ParsedLine(depth=2, name="x")
    assert line.is_last is False
    line.is_last = True
    assert line.is_last


def test_materialize_options_defaults() -> None:
    opts = MaterializeOptions()
    assert not opts.dry_run
    assert not opts.force


def test_build_summary(plan) -> None:
    """TC-02: Summary counts entries by kind and outcomes by action."""
    outcomes = [
        EntryOutcome("a", False, ACTION_EXISTS),
        EntryOutcome("a/b.txt", True, ACTION_CREATED),
    ]
    summary = build_summary(plan, outcomes)
    assert summary == {
        "total": 2,
        "files": 1,
        "directories": 1,
        "actions": {ACTION_EXISTS: 1, ACTION_CREATED: 1},
    }


def test_success_result_is_ok(plan) -> None:
    cfg = {"base_dir": "/tmp/x", "dry_run": True, "force": False}
    result = create_success_result(cfg, "tree", plan, [])
    assert result.ok
    assert result.error == ""
    assert result.base_dir == "/tmp/x"
    assert result.dry_run
    assert result.rejected == []


def test_success_result_with_rejections_is_not_ok(plan) -> None:
    """TC-03: A completed run that rejected entries reports failure."""
    outcomes = [
        EntryOutcome("a", False, ACTION_REJECTED, "outside"),
        EntryOutcome("a/b.txt", True, ACTION_REJECTED, "outside"),
    ]
    result = create_success_result({}, "flat", plan, outcomes)
    assert not result.ok
    assert result.error == "2 entries rejected outside base directory."
    assert len(result.rejected) == 2


def test_single_rejection_message(plan) -> None:
    outcomes = [EntryOutcome("a", False, ACTION_REJECTED, "outside")]
    result = create_success_result({}, "flat", plan, outcomes)
    assert result.error == "1 entry rejected outside base directory."


def test_error_result() -> None:
    result = create_error_result("Filesystem error: boom", {"base_dir": "/b"}, "tree")
    assert not result.ok
    assert result.error == "Filesystem error: boom"
    assert result.input_format == "tree"
    assert result.entries == []
    assert result.summary["total"] == 0
