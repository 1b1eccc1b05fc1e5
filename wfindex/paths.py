"""Path helpers for descriptor locations inside a remote file tree."""

from __future__ import annotations

import re

_SEPARATOR = "/"
_DUPLICATE_SEPARATORS = re.compile(r"/{2,}")


def derive_base(initial_path: str) -> str:
    """Return everything before the final separator of ``initial_path``.

    ``/workflow/Snakefile`` yields ``/workflow`` and ``/Snakefile`` yields the
    empty string (the tree root).
    """
    position = initial_path.rfind(_SEPARATOR)
    if position < 0:
        raise ValueError(f"Descriptor path has no directory component: {initial_path!r}")
    return initial_path[:position]


def normalize_path(path: str) -> str:
    """Collapse duplicate separators and anchor the path at the tree root."""
    collapsed = _DUPLICATE_SEPARATORS.sub(_SEPARATOR, f"{_SEPARATOR}{path}")
    if len(collapsed) > 1 and collapsed.endswith(_SEPARATOR):
        collapsed = collapsed[:-1]
    return collapsed


def join_path(*parts: str | None) -> str:
    """Join path fragments into a normalized, root-anchored path."""
    pieces = [part for part in parts if part]
    return normalize_path(_SEPARATOR.join(pieces))


def parent_name(path: str) -> str:
    """Return the last segment of ``path`` (``workflow`` for ``/workflow``)."""
    return path.rstrip(_SEPARATOR).rsplit(_SEPARATOR, 1)[-1]


__all__ = ["derive_base", "join_path", "normalize_path", "parent_name"]
