from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides input sourcing, cross-platform path normalization, the base
directory guard, and the primitive create operations used by the
materializer. Acts as an abstraction over 'os' so that the rest of the
application never touches the filesystem directly.
"""

import os
import sys
from typing import Optional, TextIO

from mkstruct.domain.errors import InputMissingError, InputReadError, PathEscapesRootError

STDIN_LABEL = "<stdin>"

# -----------------------------------------------------------------------------
# INPUT SOURCING API
# -----------------------------------------------------------------------------

def read_structure_input(
        file_path: Optional[str] = None,
        *,
        use_stdin: bool = False,
        text: Optional[str] = None,
        stdin: Optional[TextIO] = None,
) -> str:
    """
    Fetch the structure text from the first available source.

    Priority: inline text, explicit stdin, named file, then piped stdin
    when no file was named and stdin is not a terminal.

    Args:
        file_path: Path to a structure file.
        use_stdin: Force reading from standard input.
        text: Inline structure text.
        stdin: Stream to use instead of sys.stdin.

    Returns:
        str: The whole input, unparsed.

    Raises:
        InputMissingError: If no source provided any input.
        InputReadError: If the named file (or stdin) cannot be read.
    """
    stream = stdin if stdin is not None else sys.stdin

    if text is not None:
        return text

    if use_stdin:
        return _read_stream(stream)

    if file_path:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            raise InputReadError(file_path, "file not found")
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(file_path, str(e))

    if stream is not None and not _is_tty(stream):
        return _read_stream(stream)

    raise InputMissingError("No input provided. Pass a structure file, --text, or pipe into --stdin.")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if resolution fails.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_within_root(base_dir: str, rel_path: str) -> str:
    """
    Resolve an entry against the base directory, refusing escapes.

    Args:
        base_dir: Absolute base directory.
        rel_path: Entry path as parsed.

    Returns:
        str: Absolute target path inside base_dir.

    Raises:
        PathEscapesRootError: If the entry resolves outside base_dir.
    """
    full = os.path.abspath(os.path.join(base_dir, rel_path))
    try:
        rel = os.path.relpath(full, base_dir)
    except ValueError:
        # Different drive on Windows
        raise PathEscapesRootError(rel_path, base_dir)
    if rel == os.pardir or rel.startswith(os.pardir + os.sep) or os.path.isabs(rel):
        raise PathEscapesRootError(rel_path, base_dir)
    return full


def display_path(full_path: str, base_dir: str) -> str:
    """Render a target path relative to the base directory for log output."""
    try:
        return os.path.relpath(full_path, base_dir)
    except ValueError:
        return full_path

# -----------------------------------------------------------------------------
# CREATION PRIMITIVES
# -----------------------------------------------------------------------------

def make_dirs(path: str) -> None:
    """Create a directory and any missing parents."""
    os.makedirs(path, exist_ok=True)


def write_empty_file(path: str, *, overwrite: bool = False) -> None:
    """
    Create (or truncate) an empty file.

    Raises:
        FileExistsError: If the file exists and overwrite is False.
    """
    with open(path, "w" if overwrite else "x", encoding="utf-8"):
        pass

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _read_stream(stream: TextIO) -> str:
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(STDIN_LABEL, str(e))


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
