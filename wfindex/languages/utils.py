"""Shared helpers for the line-oriented descriptor heuristics."""

from __future__ import annotations

import re
from typing import List, Optional

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(contents: str) -> List[str]:
    """Split descriptor text on ``\\n`` or ``\\r\\n``.

    Trailing empty lines are dropped, but an empty document still yields a
    single empty line.
    """
    lines = _LINE_BREAK.split(contents)
    if len(lines) > 1:
        while lines and lines[-1] == "":
            lines.pop()
    return lines


def second_token(line: str, separator: str | None = None) -> Optional[str]:
    """Return the token after the directive keyword, or None when absent."""
    parts = line.split(separator)
    if separator is not None:
        parts = [part for part in parts if part]
    if len(parts) < 2:
        return None
    value = parts[1].strip()
    return value or None


__all__ = ["second_token", "split_lines"]
