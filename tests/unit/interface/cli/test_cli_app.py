from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Drives the in-process entry point with explicit argv and stdin streams and
verifies exit codes, rendered output, and filesystem side effects.
"""

import io
import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

from conftest import TtyStringIO
from mkstruct import main as supervisor
from mkstruct.interface.cli.app import (
    EXIT_FAILURE,
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    main,
)

FLAT = "src/index.js\nREADME\n.gitignore"


def run(argv, stdin=None):
    return main(argv, stdin=stdin if stdin is not None else TtyStringIO(""))

# -----------------------------------------------------------------------------
# INPUT SOURCES
# -----------------------------------------------------------------------------

def test_inline_text_creates_structure(tmp_path: Path, capsys) -> None:
    """TC-01: Inline flat text is created under the base directory."""
    code = run([f"--text={FLAT}", "-C", str(tmp_path)])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert (tmp_path / "src" / "index.js").is_file()
    assert (tmp_path / "README").is_file()
    assert "Done: 3 created, 0 existing, 0 skipped, 0 rejected." in out


def test_structure_file_argument(tmp_path: Path, canonical_tree: str) -> None:
    structure = tmp_path / "structure.txt"
    structure.write_text(canonical_tree, encoding="utf-8")
    target = tmp_path / "out"

    code = run([str(structure), "-C", str(target)])

    assert code == EXIT_OK
    assert (target / "a" / "b" / "c.txt").is_file()
    assert (target / "a" / "d").is_dir()


def test_explicit_stdin(tmp_path: Path) -> None:
    code = run(["--stdin", "-C", str(tmp_path)], stdin=TtyStringIO("piped.txt\n"))
    assert code == EXIT_OK
    assert (tmp_path / "piped.txt").is_file()


def test_implicit_piped_stdin(tmp_path: Path) -> None:
    """Non-terminal stdin is read when no file or text was given."""
    code = run(["-C", str(tmp_path)], stdin=io.StringIO("implicit.txt"))
    assert code == EXIT_OK
    assert (tmp_path / "implicit.txt").is_file()


def test_no_input_is_usage_error(tmp_path: Path, capsys) -> None:
    """TC-02: A terminal stdin without file or text is reported, not awaited."""
    code = run(["-C", str(tmp_path)])

    err = capsys.readouterr().err
    assert code == EXIT_INPUT_ERROR
    assert "ERROR: No input provided" in err


def test_missing_structure_file(tmp_path: Path, capsys) -> None:
    code = run([str(tmp_path / "nope.txt"), "-C", str(tmp_path)])

    err = capsys.readouterr().err
    assert code == EXIT_INPUT_ERROR
    assert "Cannot read structure file" in err
    assert "file not found" in err


def test_empty_input_is_success(tmp_path: Path, capsys) -> None:
    code = run(["--text=", "-C", str(tmp_path)])

    assert code == EXIT_OK
    assert "Nothing to create" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []

# -----------------------------------------------------------------------------
# POLICY AND FAILURES
# -----------------------------------------------------------------------------

def test_dry_run_summary(tmp_path: Path, capsys, canonical_tree: str) -> None:
    code = run([f"--text={canonical_tree}", "-C", str(tmp_path), "--dry-run"])

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert list(tmp_path.iterdir()) == []
    assert "Dry run: 4 entries would be created" in captured.out
    assert "[DRY] mkdir: a" in captured.err


def test_force_overwrites(tmp_path: Path, capsys) -> None:
    existing = tmp_path / "keep.txt"
    existing.write_text("data", encoding="utf-8")

    code = run(["--text=keep.txt", "-C", str(tmp_path)])
    assert code == EXIT_OK
    assert existing.read_text(encoding="utf-8") == "data"
    assert "1 skipped" in capsys.readouterr().out

    code = run(["--text=keep.txt", "-C", str(tmp_path), "--force"])
    assert code == EXIT_OK
    assert existing.read_text(encoding="utf-8") == ""


def test_rejected_entries_exit_nonzero(tmp_path: Path, capsys) -> None:
    """TC-03: Escaping entries make the run fail after creating the rest."""
    base = tmp_path / "base"
    base.mkdir()

    code = run(["--text=../escape.txt\nok.txt", "-C", str(base)])

    captured = capsys.readouterr()
    assert code == EXIT_FAILURE
    assert (base / "ok.txt").is_file()
    assert not (tmp_path / "escape.txt").exists()
    assert "1 rejected" in captured.out
    assert "rejected because they resolve outside" in captured.err


def test_filesystem_failure(tmp_path: Path, capsys) -> None:
    with patch("mkstruct.core.pipeline.materializer.make_dirs", side_effect=PermissionError("denied")):
        code = run(["--text=locked/x.txt", "-C", str(tmp_path)])

    assert code == EXIT_FAILURE
    assert "Structure generation failed: Filesystem error: denied" in capsys.readouterr().err


def test_keyboard_interrupt(tmp_path: Path, capsys) -> None:
    with patch("mkstruct.interface.cli.app.run_pipeline", side_effect=KeyboardInterrupt):
        code = run(["--text=a.txt", "-C", str(tmp_path)])

    assert code == EXIT_INTERRUPTED
    assert "Interrupted by user." in capsys.readouterr().err


def test_keyboard_interrupt_while_reading_stdin(tmp_path: Path, capsys) -> None:
    """Ctrl-C while waiting on a terminal stdin ends the run with 130."""
    class _InterruptedStdin(TtyStringIO):
        def read(self, *args):
            raise KeyboardInterrupt

    code = run(["--stdin", "-C", str(tmp_path)], stdin=_InterruptedStdin(""))

    err = capsys.readouterr().err
    assert code == EXIT_INTERRUPTED
    assert "Interrupted by user." in err
    assert "CRITICAL ERROR" not in err
    assert list(tmp_path.iterdir()) == []

# -----------------------------------------------------------------------------
# OUTPUT MODES
# -----------------------------------------------------------------------------

def test_json_output(tmp_path: Path, capsys, canonical_tree: str) -> None:
    code = run([f"--text={canonical_tree}", "-C", str(tmp_path), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert payload["ok"] is True
    assert payload["input_format"] == "tree"
    assert payload["summary"]["total"] == 4
    assert [o["action"] for o in payload["outcomes"]] == ["created"] * 4


def test_print_plan_does_not_touch_disk(tmp_path: Path, capsys, canonical_tree: str) -> None:
    code = run([f"--text={canonical_tree}", "-C", str(tmp_path), "--print-plan"])

    lines = capsys.readouterr().out.splitlines()
    assert code == EXIT_OK
    assert list(tmp_path.iterdir()) == []
    assert lines == [
        "a/",
        os.path.join("a", "b") + "/",
        os.path.join("a", "d") + "/",
        os.path.join("a", "b", "c.txt"),
    ]


def test_print_plan_json(tmp_path: Path, capsys) -> None:
    code = run([f"--text={FLAT}", "-C", str(tmp_path), "--print-plan", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert payload["input_format"] == "flat"
    assert [e["path"] for e in payload["entries"]] == ["README", ".gitignore", "src/index.js"]
    assert all(e["is_file"] for e in payload["entries"])


def test_dump_config(tmp_path: Path, capsys) -> None:
    code = run(["-C", str(tmp_path), "--dump-config", "--force"])

    cfg = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert cfg["base_dir"] == str(tmp_path)
    assert cfg["force"] is True
    assert cfg["dry_run"] is False


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    target = tmp_path / "out"

    code = run(["--text=made.txt", "-C", str(target), "--log-file", str(log_file)])

    assert code == EXIT_OK
    content = log_file.read_text(encoding="utf-8")
    assert "Created file: made.txt" in content
    assert "| INFO |" in content

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR
# -----------------------------------------------------------------------------

def test_supervisor_reports_crash(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    with patch("mkstruct.interface.cli.app.main", side_effect=RuntimeError("kaboom")):
        code = supervisor.main()

    err = capsys.readouterr().err
    assert code == 1
    assert "CRITICAL ERROR (MKSTRUCT)" in err
    assert "kaboom" in err


def test_supervisor_returns_cli_exit_code(monkeypatch) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    with patch("mkstruct.interface.cli.app.main", return_value=EXIT_INPUT_ERROR):
        assert supervisor.main() == EXIT_INPUT_ERROR
