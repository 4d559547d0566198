from __future__ import annotations

"""
Tree Glyph Normalizer.

Rewrites any supported tree drawing into the canonical grammar:
- Branch: '├── ' and '└── '
- Continuation: '│   ' (one glyph plus 3 spaces per level)
- Root entries: bare names at depth 0

Light, heavy, double and dashed box-drawing families are accepted, along
with legacy dash prefixes ('-name', '--name') and irregular indentation.
Normalization runs in two passes: the first computes (depth, name) per line,
the second derives which lines are the last sibling at their depth.
"""

import math
import re
from typing import List, Optional

from mkstruct.domain.constants import (
    BRANCH_GLYPHS,
    CANONICAL,
    CONTINUATION_GLYPHS,
    HORIZONTAL_GLYPHS,
    INDENT_SIZE,
    LAST_BRANCH_GLYPHS,
)
from mkstruct.domain.models import ParsedLine

# -----------------------------------------------------------------------------
# PATTERNS
# -----------------------------------------------------------------------------

_ALL_BRANCHES = BRANCH_GLYPHS + LAST_BRANCH_GLYPHS

_STANDARD_RX = re.compile(
    rf"^((?:[{CONTINUATION_GLYPHS}]|\s)*?)"
    rf"([{_ALL_BRANCHES}][{HORIZONTAL_GLYPHS}]*\s*)\s*(.+)$"
)
_LEGACY_RX = re.compile(r"^(\s*)(--|-)\s*(.+)$")

# Bare depth-0 name; shared with the tree parser so both agree on what a root is
ROOT_LINE_RX = re.compile(
    rf"^([^\s#{_ALL_BRANCHES}{CONTINUATION_GLYPHS}{HORIZONTAL_GLYPHS}\-].*)$"
)

_GLYPH_RX = re.compile(rf"[{_ALL_BRANCHES}{CONTINUATION_GLYPHS}]")
_LEGACY_TREE_RX = re.compile(r"^\s*(?:--|-|└─|├─)\s*")

# Trailing report printed by the `tree` command ("3 directories, 7 files")
_TREE_REPORT_RX = re.compile(r"^\d+ director(?:y|ies)(?:, \d+ files?)?$")

_CANONICAL_LINE_RX = re.compile(r"^((?:│ {3})*)(├──|└──)\s")
_NON_CANONICAL_RX = re.compile(
    rf"[{BRANCH_GLYPHS.replace('├', '')}{LAST_BRANCH_GLYPHS.replace('└', '')}"
    rf"{CONTINUATION_GLYPHS.replace('│', '')}{HORIZONTAL_GLYPHS.replace('─', '')}]"
)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_tree_line(line: str) -> bool:
    """Return True if the line carries any tree glyph or a legacy dash prefix."""
    if not line or not line.strip():
        return False
    return bool(_GLYPH_RX.search(line) or _LEGACY_TREE_RX.match(line))


def has_tree_structure(text: str) -> bool:
    """Return True if any line of the text looks like part of a tree."""
    if not text or not isinstance(text, str):
        return False
    return any(is_tree_line(line) for line in text.splitlines())


def analyze_tree_line(line: str) -> Optional[ParsedLine]:
    """
    Compute the depth and name of a single raw line.

    The line's own branch glyph adds one level on top of whatever its
    prefix (continuation glyphs and spaces) contributes.

    Args:
        line: Raw input line.

    Returns:
        Optional[ParsedLine]: The analyzed line, or None when the line is
                              blank or unrecognizable.
    """
    if not line or not line.strip():
        return None

    expanded = line.replace("\t", "    ")

    m = _STANDARD_RX.match(expanded)
    if m:
        prefix, branch, raw_name = m.groups()
        name = _clean_name(raw_name)
        if not name:
            return None
        return ParsedLine(depth=_prefix_depth(prefix) + 1, name=name, is_last=branch[0] in LAST_BRANCH_GLYPHS)

    m = _LEGACY_RX.match(expanded)
    if m:
        spaces, dashes, raw_name = m.groups()
        name = _clean_name(raw_name)
        if not name:
            return None
        return ParsedLine(depth=len(spaces) // INDENT_SIZE + len(dashes), name=name)

    m = ROOT_LINE_RX.match(expanded)
    if m:
        name = _clean_name(m.group(1))
        if not name or _TREE_REPORT_RX.match(name):
            return None
        return ParsedLine(depth=0, name=name)

    return None


def mark_last_siblings(parsed: List[ParsedLine]) -> None:
    """Fill in is_last for every line by looking ahead for a sibling."""
    for i, current in enumerate(parsed):
        current.is_last = _is_last_at_depth(parsed, i)


def build_canonical_line(depth: int, name: str, is_last: bool) -> str:
    """Render one entry in the canonical grammar."""
    if depth == 0:
        return name
    prefix = CANONICAL["CONTINUATION"] * (depth - 1)
    prefix += CANONICAL["LAST_BRANCH"] if is_last else CANONICAL["BRANCH"]
    return prefix + name


def normalize_tree(text: str) -> str:
    """
    Rewrite a tree drawing into the canonical grammar.

    Idempotent. Input in which no line sits below depth 0 (a flat path
    list) is returned untouched, blank lines included.

    Args:
        text: Raw structure text.

    Returns:
        str: Canonical tree text, one entry per line.
    """
    if not text or not isinstance(text, str):
        return text

    parsed: List[ParsedLine] = []
    for line in text.splitlines():
        analyzed = analyze_tree_line(line)
        if analyzed is not None:
            parsed.append(analyzed)

    if not parsed or all(p.depth == 0 for p in parsed):
        return text

    mark_last_siblings(parsed)

    return "\n".join(build_canonical_line(p.depth, p.name, p.is_last) for p in parsed)


def normalize_tree_lines(lines: List[str]) -> List[str]:
    """List-of-lines variant of normalize_tree."""
    return normalize_tree("\n".join(lines)).splitlines()


def is_canonical_format(text: str) -> bool:
    """
    Check whether the text already uses only the canonical grammar.

    Args:
        text: Structure text.

    Returns:
        bool: False when any non-canonical glyph, legacy dash prefix, or
              misaligned branch line is present.
    """
    if not text or not isinstance(text, str):
        return False

    for line in text.splitlines():
        if not line.strip():
            continue
        if _NON_CANONICAL_RX.search(line) or _LEGACY_RX.match(line):
            return False
        if ("├" in line or "└" in line) and not _CANONICAL_LINE_RX.match(line):
            return False
    return True


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _prefix_depth(prefix: str) -> int:
    """Count the levels contributed by the text in front of a branch glyph."""
    depth = 0
    i = 0
    n = len(prefix)

    while i < n:
        ch = prefix[i]
        if ch in CONTINUATION_GLYPHS:
            depth += 1
            i += 1
            spaces = 0
            while i < n and prefix[i] == " ":
                spaces += 1
                i += 1
            if spaces > INDENT_SIZE:
                depth += (spaces - 2) // INDENT_SIZE
        elif ch == " ":
            spaces = 0
            while i < n and prefix[i] == " ":
                spaces += 1
                i += 1
            if spaces >= INDENT_SIZE:
                depth += math.ceil(spaces / INDENT_SIZE)
        else:
            i += 1

    return depth


def _is_last_at_depth(parsed: List[ParsedLine], index: int) -> bool:
    depth = parsed[index].depth
    for nxt in parsed[index + 1:]:
        if nxt.depth == depth:
            return False
        if nxt.depth < depth:
            return True
    return True


def _clean_name(raw: str) -> str:
    return raw.strip()
