"""Structural validation rules applied to an indexed workflow."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Tuple

from ..models import FileIndex, VersionTypeValidation
from ..paths import join_path
from .utils import split_lines

UNKNOWN_KEYWORD_MESSAGE = "unknown keyword"


class WorkflowSetRule(ABC):
    """A single check contributing to a workflow-set verdict.

    Rules record failures on the shared verdict and never raise.
    """

    @abstractmethod
    def check(
        self,
        initial_path: str,
        contents: str,
        indexed_files: FileIndex,
        verdict: VersionTypeValidation,
    ) -> None:
        """Reject ``verdict`` entries for anything this rule does not accept."""


class KeywordLineRule(WorkflowSetRule):
    """Every descriptor line must start with a recognised directive keyword."""

    def __init__(self, keywords: Iterable[str], message: str = UNKNOWN_KEYWORD_MESSAGE) -> None:
        self._keywords: Tuple[str, ...] = tuple(keywords)
        self._message = message

    def check(self, initial_path, contents, indexed_files, verdict) -> None:
        for line in split_lines(contents):
            if not line.startswith(self._keywords):
                verdict.reject(initial_path, self._message)


class PathShapeRule(WorkflowSetRule):
    """The primary descriptor must sit at one of a few canonical locations."""

    def __init__(self, canonical_paths: Iterable[str], message: str) -> None:
        self._canonical = frozenset(path.lower() for path in canonical_paths)
        self._message = message

    def accepts(self, initial_path: str) -> bool:
        return initial_path.lower() in self._canonical

    def check(self, initial_path, contents, indexed_files, verdict) -> None:
        if not self.accepts(initial_path):
            verdict.reject(initial_path, self._message)


class MarkerFileRule(WorkflowSetRule):
    """Opt-in marker file must be present at the repository root."""

    def __init__(self, marker: str) -> None:
        self.marker = marker

    def present(self, indexed_files: FileIndex) -> bool:
        return self.marker in indexed_files or join_path(self.marker) in indexed_files

    def check(self, initial_path, contents, indexed_files, verdict) -> None:
        if not self.present(indexed_files):
            verdict.reject(self.marker, f"Missing {self.marker} at the repository root")


def run_rules(
    rules: Iterable[WorkflowSetRule],
    initial_path: str,
    contents: str,
    indexed_files: FileIndex,
) -> VersionTypeValidation:
    """Apply ``rules`` in order to a fresh verdict."""
    verdict = VersionTypeValidation()
    for rule in rules:
        rule.check(initial_path, contents, indexed_files, verdict)
    return verdict


__all__ = [
    "KeywordLineRule",
    "MarkerFileRule",
    "PathShapeRule",
    "UNKNOWN_KEYWORD_MESSAGE",
    "WorkflowSetRule",
    "run_rules",
]
