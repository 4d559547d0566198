from __future__ import annotations

"""Flat path list parser: one path per non-blank line, passed through as written."""

from typing import List


def parse_flat(text: str) -> List[str]:
    """Trim every line and drop the empty ones."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]
