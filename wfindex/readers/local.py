"""Filesystem-backed file reader for local checkouts."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..logging import get_logger

_LOGGER = get_logger("readers.local")


class LocalFileReader:
    """Serves root-anchored workflow paths from a directory on disk."""

    def __init__(self, root: str | Path) -> None:
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Repository path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Repository path is not a directory: {root}")
        self.root = root_path

    def read_file(self, path: str) -> str:
        target = self._resolve(path)
        if not target.is_file():
            raise FileNotFoundError(f"No such file {path} under {self.root}")
        # Binary assets (compressed references, report images) are indexed too.
        return target.read_text(encoding="utf-8", errors="replace")

    def list_files(self, directory: str) -> Optional[List[str]]:
        target = self._resolve(directory)
        if not target.is_dir():
            _LOGGER.debug("Directory %s not present under %s", directory, self.root)
            return None
        # Only regular files, the way a git host's tree listing is filtered.
        return sorted(entry.name for entry in target.iterdir() if entry.is_file())

    def _resolve(self, path: str) -> Path:
        relative = path.lstrip("/")
        target = (self.root / relative).resolve()
        if target != self.root and self.root not in target.parents:
            raise FileNotFoundError(f"Path escapes repository root: {path}")
        return target


__all__ = ["LocalFileReader"]
