"""Base classes for workflow description languages."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..models import FileIndex, VersionTypeValidation, WorkflowMetadata
from ..readers.base import FileReader
from .conventions import WorkflowIndexer
from .metadata import DirectiveMetadataParser
from .rules import WorkflowSetRule, run_rules


class WorkflowLanguage(ABC):
    """Contract every supported workflow language fulfils."""

    short_name: str
    long_name: str
    descriptor_language: str

    @abstractmethod
    def initial_path_pattern(self) -> re.Pattern[str]:
        """Pattern a primary descriptor path must fully match."""

    def matches_initial_path(self, initial_path: str) -> bool:
        return self.initial_path_pattern().fullmatch(initial_path) is not None

    @abstractmethod
    def index_workflow_files(
        self, initial_path: str, contents: str, reader: FileReader
    ) -> FileIndex:
        """Discover and read every file that belongs to the workflow."""

    @abstractmethod
    def validate_workflow_set(
        self, initial_path: str, contents: str, indexed_files: FileIndex
    ) -> VersionTypeValidation:
        """Check the indexed files against the language's expected shape."""

    @abstractmethod
    def validate_test_parameter_set(self, indexed_files: FileIndex) -> VersionTypeValidation:
        """Check test parameter files."""

    @abstractmethod
    def parse_workflow_for_metadata(
        self, initial_path: str, contents: str, indexed_files: FileIndex
    ) -> WorkflowMetadata:
        """Extract author and description from the primary descriptor."""

    def launch_instructions(self, trs_id: str) -> Optional[str]:
        return None


@dataclass(frozen=True)
class LanguagePolicy:
    """Everything that distinguishes one convention-driven language from another."""

    short_name: str
    long_name: str
    descriptor_language: str
    path_pattern: re.Pattern[str]
    indexer: WorkflowIndexer
    rules: Tuple[WorkflowSetRule, ...] = ()
    metadata_parser: DirectiveMetadataParser = field(default_factory=DirectiveMetadataParser)

    @classmethod
    def compile(cls, *, path_pattern: str, flags: int = 0, **kwargs) -> "LanguagePolicy":
        return cls(path_pattern=re.compile(path_pattern, flags), **kwargs)


class ConventionLanguage(WorkflowLanguage):
    """Generic language whose behaviour is entirely described by a policy."""

    def __init__(self, policy: LanguagePolicy) -> None:
        self.policy = policy
        self.short_name = policy.short_name
        self.long_name = policy.long_name
        self.descriptor_language = policy.descriptor_language

    def initial_path_pattern(self) -> re.Pattern[str]:
        return self.policy.path_pattern

    def index_workflow_files(self, initial_path, contents, reader) -> FileIndex:
        return self.policy.indexer.index(initial_path, contents, reader)

    def validate_workflow_set(self, initial_path, contents, indexed_files) -> VersionTypeValidation:
        return run_rules(self.policy.rules, initial_path, contents, indexed_files)

    def validate_test_parameter_set(self, indexed_files: FileIndex) -> VersionTypeValidation:
        # No test parameter rules exist yet for any convention.
        return VersionTypeValidation()

    def parse_workflow_for_metadata(self, initial_path, contents, indexed_files) -> WorkflowMetadata:
        return self.policy.metadata_parser.parse(contents)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.short_name!r})"


__all__ = ["ConventionLanguage", "LanguagePolicy", "WorkflowLanguage"]
