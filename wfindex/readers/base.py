"""File access capability consumed by indexers."""

from __future__ import annotations

from typing import List, Optional, Protocol


class FileReader(Protocol):
    """Read and list files in an external tree (a git host, a checkout, ...).

    Paths are root-anchored (``/workflow/Snakefile``). Implementations own any
    caching, retries and rate limiting.
    """

    def read_file(self, path: str) -> str:
        """Return the full text of ``path``; raise ``FileNotFoundError`` if absent."""

    def list_files(self, directory: str) -> Optional[List[str]]:
        """Return file names directly inside ``directory``, or ``None`` if it is absent."""
