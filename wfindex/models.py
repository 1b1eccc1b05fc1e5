"""Core data models shared across wfindex components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class GenericFileType(str, Enum):
    """Role a file plays within an indexed workflow."""

    PRIMARY_DESCRIPTOR = "primary_descriptor"
    IMPORTED_DESCRIPTOR = "imported_descriptor"
    TEST_PARAMETER_FILE = "test_parameter_file"
    OTHER = "other"


@dataclass(frozen=True)
class FileRecord:
    """A single file pulled into a workflow index."""

    path: str
    content: str
    role: GenericFileType
    version: Optional[str] = None


FileIndex = Dict[str, FileRecord]


@dataclass
class VersionTypeValidation:
    """Verdict of a structural validation run.

    ``messages`` holds one diagnostic per path; a later rejection for the same
    path replaces the earlier message.
    """

    valid: bool = True
    messages: Dict[str, str] = field(default_factory=dict)

    def reject(self, path: str, message: str) -> None:
        self.valid = False
        self.messages[path] = message


@dataclass
class WorkflowMetadata:
    """Descriptive metadata extracted from a primary descriptor."""

    author: Optional[str] = None
    description: Optional[str] = None


__all__ = [
    "FileIndex",
    "FileRecord",
    "GenericFileType",
    "VersionTypeValidation",
    "WorkflowMetadata",
]
