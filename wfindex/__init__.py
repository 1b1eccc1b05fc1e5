"""Workflow file discovery and structural validation."""

from .inspector import InspectionResult, WorkflowInspector
from .languages import (
    SillyWorkflowLanguage,
    SnakemakeLanguage,
    WorkflowLanguage,
    discover_languages,
    get_language,
)
from .models import FileRecord, GenericFileType, VersionTypeValidation, WorkflowMetadata

__all__ = [
    "FileRecord",
    "GenericFileType",
    "InspectionResult",
    "SillyWorkflowLanguage",
    "SnakemakeLanguage",
    "VersionTypeValidation",
    "WorkflowInspector",
    "WorkflowLanguage",
    "WorkflowMetadata",
    "discover_languages",
    "get_language",
]
