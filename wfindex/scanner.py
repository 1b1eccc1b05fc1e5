"""Single-directory listing for convention-driven discovery."""

from __future__ import annotations

from typing import Optional, Set

from .logging import get_logger
from .paths import join_path
from .readers.base import FileReader

_LOGGER = get_logger("scanner")


class FolderScanner:
    """Lists one folder through a file reader and returns relative paths.

    Directory listings are preferred over probing candidate names: git hosts
    count every 404 against the rate limit, while a listing is one call and is
    often cached.
    """

    def scan(self, base: str, subfolder: Optional[str], reader: FileReader) -> Set[str]:
        """Return ``subfolder/name`` (or bare ``name``) for each file listed."""
        directory = join_path(base, subfolder)
        names = reader.list_files(directory)
        if not names:
            _LOGGER.debug("No files listed in %s", directory)
            return set()

        prefix = f"{subfolder.strip('/')}/" if subfolder else ""
        return {f"{prefix}{name}" for name in names}


__all__ = ["FolderScanner"]
