from __future__ import annotations

"""
Input Format Detector.

Decides, for the input as a whole, whether it is a tree drawing or a flat
path list. Only genuine box-drawing glyphs switch on tree mode: legacy dash
prefixes ('-name', '--name') are understood by the normalizer once tree mode
is chosen, but never select it on their own.
"""

import re
from typing import Iterable

from mkstruct.domain.constants import (
    BRANCH_GLYPHS,
    CONTINUATION_GLYPHS,
    FORMAT_EMPTY,
    FORMAT_FLAT,
    FORMAT_TREE,
    LAST_BRANCH_GLYPHS,
)

_TREE_GLYPH_RX = re.compile(rf"[{BRANCH_GLYPHS}{LAST_BRANCH_GLYPHS}{CONTINUATION_GLYPHS}]")


def looks_like_tree(lines: Iterable[str]) -> bool:
    """Return True if at least one line holds a branch or continuation glyph."""
    return any(_TREE_GLYPH_RX.search(line) for line in lines)


def detect_format(text: str) -> str:
    """
    Classify raw input as 'tree', 'flat' or 'empty'.

    Args:
        text: Raw structure text.

    Returns:
        str: One of the FORMAT_* constants.
    """
    if not text or not text.strip():
        return FORMAT_EMPTY
    return FORMAT_TREE if looks_like_tree(text.splitlines()) else FORMAT_FLAT
