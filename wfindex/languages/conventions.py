"""Convention indexers that turn a primary descriptor into a file index."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from ..logging import get_logger
from ..models import FileIndex, FileRecord, GenericFileType
from ..paths import derive_base, join_path, parent_name
from ..readers.base import FileReader
from ..scanner import FolderScanner
from .utils import second_token, split_lines

_LOGGER = get_logger("languages.conventions")


class WorkflowIndexer(ABC):
    """Contract for strategies that discover the files belonging to a workflow."""

    @abstractmethod
    def index(self, initial_path: str, contents: str, reader: FileReader) -> FileIndex:
        """Return a fresh index that always contains ``initial_path``."""


@dataclass(frozen=True)
class ScanStep:
    """One folder listing in a repository convention.

    ``folder`` is relative to the repository root (``None`` lists the root
    itself). When ``requires`` is set, the step only runs if that path is
    already in the index.
    """

    folder: Optional[str]
    requires: Optional[str] = None

    def applies(self, results: FileIndex) -> bool:
        return self.requires is None or self.requires in results


class FolderConventionIndexer(WorkflowIndexer):
    """Walks a fixed, ordered table of conventional folders."""

    def __init__(
        self,
        layout: Sequence[ScanStep],
        *,
        entry_folder: Optional[str] = None,
        primary_version: Optional[str] = None,
        scanner: FolderScanner | None = None,
    ) -> None:
        self._layout = tuple(layout)
        self._entry_folder = entry_folder
        self._primary_version = primary_version
        self._scanner = scanner or FolderScanner()

    def repository_root(self, initial_path: str) -> str:
        """Return the folder the layout is anchored at.

        A descriptor inside the entry folder (``/workflow/Snakefile``) anchors
        the layout one level up so both supported placements share a root.
        The entry folder matches case-insensitively, like the descriptor
        patterns that accept it.
        """
        base = derive_base(initial_path)
        if self._entry_folder and parent_name(base).lower() == self._entry_folder.lower():
            base = derive_base(base)
        return join_path(base)

    def index(self, initial_path: str, contents: str, reader: FileReader) -> FileIndex:
        results: FileIndex = {
            initial_path: FileRecord(
                path=initial_path,
                content=contents,
                role=GenericFileType.PRIMARY_DESCRIPTOR,
                version=self._primary_version,
            )
        }
        root = self.repository_root(initial_path)

        for step in self._layout:
            if not step.applies(results):
                _LOGGER.debug("Skipping %s; %s not indexed", step.folder, step.requires)
                continue
            self._index_folder(root, step.folder, reader, results)

        _LOGGER.info("Indexed %d files for %s", len(results), initial_path)
        return results

    def _index_folder(
        self,
        root: str,
        folder: Optional[str],
        reader: FileReader,
        results: FileIndex,
    ) -> None:
        for relative in sorted(self._scanner.scan(root, folder, reader)):
            path = join_path(root, relative)
            if path in results:
                continue
            try:
                content = reader.read_file(path)
            except (FileNotFoundError, IsADirectoryError):
                # Some listings include sub-folder names alongside files.
                _LOGGER.warning("Skipping listed entry %s: not a readable file", path)
                continue
            results[path] = FileRecord(
                path=path,
                content=content,
                role=GenericFileType.IMPORTED_DESCRIPTOR,
            )


class ImportDirectiveIndexer(WorkflowIndexer):
    """Follows ``import <file>`` lines in the primary descriptor, one level deep."""

    def __init__(self, keyword: str = "import") -> None:
        self._keyword = keyword

    def index(self, initial_path: str, contents: str, reader: FileReader) -> FileIndex:
        results: FileIndex = {
            initial_path: FileRecord(
                path=initial_path,
                content=contents,
                role=GenericFileType.PRIMARY_DESCRIPTOR,
            )
        }
        for line in split_lines(contents):
            if not line.startswith(self._keyword):
                continue
            target = second_token(line)
            if target is None:
                _LOGGER.warning("Ignoring %r in %s: no file named", line, initial_path)
                continue
            if target == initial_path:
                continue
            results[target] = FileRecord(
                path=target,
                content=reader.read_file(target),
                role=GenericFileType.IMPORTED_DESCRIPTOR,
            )
        return results


__all__ = [
    "FolderConventionIndexer",
    "ImportDirectiveIndexer",
    "ScanStep",
    "WorkflowIndexer",
]
