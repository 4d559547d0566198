from __future__ import annotations

"""
Tree Drawing Parser.

Turns a tree drawing into one path per entry. The input is normalized first,
so the walk only has to understand the canonical grammar. A depth stack
holds the currently open ancestor chain: stack[d] is the latest name seen at
depth d, and every insert truncates the stack to d + 1 so that names from a
previous sibling subtree never leak into the next path.
"""

import logging
import os
import re
from typing import List

from mkstruct.core.parsing.normalizer import ROOT_LINE_RX, normalize_tree
from mkstruct.domain.constants import CANONICAL

logger = logging.getLogger(__name__)

_BRANCH_LINE_RX = re.compile(r"^((?:│   )*)(├── |└── )(.+)$")

_CONTINUATION = CANONICAL["CONTINUATION"]


def parse_tree(text: str) -> List[str]:
    """
    Parse a tree drawing into an ordered list of paths.

    The first bare name (if any) becomes the root at depth 0 and shifts all
    branch lines one level down. Lines matching neither a root nor a branch
    are skipped; parsing never fails on malformed content.

    Args:
        text: Tree text in any supported glyph family.

    Returns:
        List[str]: Paths joined with the platform separator, in input order.
    """
    if not text or not text.strip():
        return []

    canonical = normalize_tree(text)

    stack: List[str] = []
    result: List[str] = []
    has_root = False

    for line in canonical.splitlines():
        if not line.strip():
            continue

        root_match = ROOT_LINE_RX.match(line)
        if root_match and not has_root:
            stack = [root_match.group(1).strip()]
            result.append(stack[0])
            has_root = True
            continue

        m = _BRANCH_LINE_RX.match(line)
        if not m:
            logger.debug(f"Skipping unparseable tree line: {line!r}")
            continue

        prefix, _, name = m.groups()
        depth = _count_continuations(prefix)
        if has_root:
            depth += 1

        _push(stack, depth, name.strip())
        result.append(os.path.join(*stack))

    return result


def _count_continuations(prefix: str) -> int:
    """Count canonical continuation tokens, consuming 4 characters at a time."""
    depth = 0
    i = 0
    step = len(_CONTINUATION)
    while prefix.startswith(_CONTINUATION, i):
        depth += 1
        i += step
    return depth


def _push(stack: List[str], depth: int, name: str) -> None:
    """Place name at depth, padding skipped levels and dropping deeper ones."""
    while len(stack) <= depth:
        stack.append("")
    stack[depth] = name
    del stack[depth + 1:]
