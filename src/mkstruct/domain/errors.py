from __future__ import annotations

"""
Domain Exceptions.

Fatal input errors end the run with a single user-facing message. Path
escape errors are raised by the filesystem guard and handled per entry.
Unexpected filesystem failures stop the run and carry the outcomes
recorded so far.
"""

from typing import List

from mkstruct.domain.models import EntryOutcome


class MkstructError(Exception):
    """Base class for all application errors."""


class InputMissingError(MkstructError):
    """No structure file, piped input, or inline text was supplied."""


class InputReadError(MkstructError):
    """The named structure file could not be found or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read structure file '{path}': {reason}")
        self.path = path
        self.reason = reason


class PathEscapesRootError(MkstructError):
    """A resolved entry would be written outside the base directory."""

    def __init__(self, path: str, base_dir: str):
        super().__init__(f"Refusing to write outside {base_dir}: {path}")
        self.path = path
        self.base_dir = base_dir


class MaterializationError(MkstructError):
    """
    An unexpected filesystem failure stopped the run part-way.

    Attributes:
        path: Entry being processed when the failure happened.
        cause: The underlying OSError.
        outcomes: Records for the entries handled before the failure.
    """

    def __init__(self, path: str, cause: OSError, outcomes: List[EntryOutcome]):
        super().__init__(str(cause))
        self.path = path
        self.cause = cause
        self.outcomes = outcomes
