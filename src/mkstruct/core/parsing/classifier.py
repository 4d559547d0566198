from __future__ import annotations

"""
Path Classifier.

Decides whether each parsed path denotes a file or a directory and orders
the plan so that parents always precede their descendants.

Rules, first match wins:
1. A trailing separator marks a directory.
2. A final component with an extension ('.' after position 0 and at least
   one character after it) marks a file.
3. A final component in the well-known extensionless set (Makefile,
   LICENSE, .gitignore, ...) marks a file, case-insensitively.
4. Anything else is a directory.
"""

import os
import re
from typing import Iterable, List, Set

from mkstruct.domain.constants import KNOWN_FILENAMES
from mkstruct.domain.models import ClassifiedPath

_SEPARATORS = "/" + (os.sep if os.sep != "/" else "") + (os.altsep or "")
_SPLIT_RX = re.compile(f"[{re.escape(_SEPARATORS)}]+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def has_trailing_separator(path: str) -> bool:
    return bool(path) and path[-1] in _SEPARATORS


def has_extension(name: str) -> bool:
    """True when a '.' sits after position 0 with at least one character after it."""
    dot = name.rfind(".")
    return 0 < dot < len(name) - 1


def is_known_filename(name: str) -> bool:
    return name.lower() in KNOWN_FILENAMES


def component_count(path: str) -> int:
    """Number of non-empty components, ignoring leading and trailing separators."""
    return len([part for part in _SPLIT_RX.split(path) if part])


def classify(path: str) -> ClassifiedPath:
    """
    Tag a single path as file or directory.

    Args:
        path: Path as produced by a parser.

    Returns:
        ClassifiedPath: The path without trailing separators plus its kind
                        and depth.
    """
    stripped = path.rstrip(_SEPARATORS) or path
    depth = component_count(path)

    if has_trailing_separator(path):
        return ClassifiedPath(path=stripped, is_file=False, depth=depth, source=path)

    name = _SPLIT_RX.split(stripped)[-1]
    is_file = has_extension(name) or is_known_filename(name)
    return ClassifiedPath(path=stripped, is_file=is_file, depth=depth, source=path)


def sort_by_depth(paths: Iterable[str]) -> List[str]:
    """Stable sort by component count so parents come before children."""
    return sorted(paths, key=component_count)


def classify_paths(paths: Iterable[str]) -> List[ClassifiedPath]:
    """
    Depth-sort and classify a parsed path list.

    Repeated paths keep only their first occurrence.

    Args:
        paths: Parser output in input order.

    Returns:
        List[ClassifiedPath]: The plan handed to the materializer.
    """
    seen: Set[str] = set()
    plan: List[ClassifiedPath] = []
    for path in sort_by_depth(paths):
        entry = classify(path)
        key = os.path.normpath(entry.path)
        if key in seen:
            continue
        seen.add(key)
        plan.append(entry)
    return plan
