"""File readers and repository builders used across the test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from wfindex.paths import derive_base, normalize_path


class InMemoryFileReader:
    """File reader over a ``path -> contents`` mapping that records every call.

    Listings are derived from the mapping unless ``listings`` overrides them
    for a directory (to simulate hosts that also list sub-folder names).
    """

    def __init__(
        self,
        files: Mapping[str, str],
        listings: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self.files: Dict[str, str] = dict(files)
        self.listings = {normalize_path(key): list(value) for key, value in (listings or {}).items()}
        self.read_calls: List[str] = []
        self.list_calls: List[str] = []

    def read_file(self, path: str) -> str:
        self.read_calls.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"No such file {path}") from None

    def list_files(self, directory: str) -> Optional[List[str]]:
        self.list_calls.append(directory)
        normalized = normalize_path(directory)
        if normalized in self.listings:
            return list(self.listings[normalized])
        names = [
            path.rsplit("/", 1)[-1]
            for path in self.files
            if path.startswith("/") and normalize_path(derive_base(path)) == normalized
        ]
        return sorted(names) or None


class WorkflowRepoBuilder:
    """Utility for writing files into a throwaway workflow repository."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the repository."""
        for relative, content in files.items():
            path = self.root / relative.lstrip("/")
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self) -> Path:
        """Return the repository root path."""
        return self.root


__all__ = ["InMemoryFileReader", "WorkflowRepoBuilder"]
