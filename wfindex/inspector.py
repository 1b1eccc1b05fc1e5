"""High-level index-and-validate runs shared by the CLI and the service."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .config import WfIndexConfig, load_config
from .languages import UnknownLanguageError, WorkflowLanguage, detect_language, load_languages
from .logging import get_logger
from .models import FileIndex, VersionTypeValidation, WorkflowMetadata
from .readers import FileReader, LocalFileReader

_LOGGER = get_logger("inspector")


@dataclass
class InspectionResult:
    """Outcome of indexing and validating one primary descriptor."""

    language: WorkflowLanguage
    initial_path: str
    files: FileIndex
    workflow_validation: VersionTypeValidation
    test_parameter_validation: VersionTypeValidation
    metadata: WorkflowMetadata

    @property
    def valid(self) -> bool:
        return self.workflow_validation.valid and self.test_parameter_validation.valid

    def to_dict(self, *, include_content: bool = False) -> Dict[str, object]:
        files: Dict[str, Dict[str, object]] = {}
        for path, record in sorted(self.files.items()):
            entry: Dict[str, object] = {"role": record.role.value, "version": record.version}
            if include_content:
                entry["content"] = record.content
            files[path] = entry
        return {
            "language": self.language.short_name,
            "initial_path": self.initial_path,
            "valid": self.valid,
            "messages": dict(self.workflow_validation.messages),
            "test_parameter_messages": dict(self.test_parameter_validation.messages),
            "metadata": {
                "author": self.metadata.author,
                "description": self.metadata.description,
            },
            "files": files,
        }


class WorkflowInspector:
    """Selects a language, indexes a workflow and validates the result."""

    def __init__(self, config: WfIndexConfig | None = None) -> None:
        self._config = config

    def languages(self, root: str | Path | None = None) -> Dict[str, WorkflowLanguage]:
        config = self._resolve_config(root)
        return load_languages(config.enabled_languages)

    def select_language(
        self,
        initial_path: str,
        *,
        name: Optional[str] = None,
        root: str | Path | None = None,
    ) -> WorkflowLanguage:
        """Pick the language for ``initial_path`` among the enabled ones.

        An explicit ``name`` wins; otherwise the first primary-path pattern that
        matches. When nothing matches, the configured default language is used
        so its validator can report the unexpected path.
        """
        config = self._resolve_config(root)
        enabled = load_languages(config.enabled_languages)
        if name is not None:
            return _by_name(enabled, name)
        try:
            return detect_language(initial_path, enabled.values())
        except UnknownLanguageError:
            if config.languages.default is None:
                raise
            _LOGGER.info(
                "No language recognises %s; falling back to %s",
                initial_path,
                config.languages.default,
            )
            return _by_name(enabled, config.languages.default)

    def inspect(
        self,
        root: str | Path,
        initial_path: str,
        *,
        language: Optional[str] = None,
        reader: FileReader | None = None,
    ) -> InspectionResult:
        """Index the workflow rooted at ``initial_path`` and validate it."""
        selected = self.select_language(initial_path, name=language, root=root)
        file_reader = reader if reader is not None else LocalFileReader(root)
        contents = file_reader.read_file(initial_path)

        _LOGGER.debug("Indexing %s as %s", initial_path, selected.short_name)
        files = selected.index_workflow_files(initial_path, contents, file_reader)
        workflow_validation = selected.validate_workflow_set(initial_path, contents, files)
        test_validation = selected.validate_test_parameter_set(files)
        metadata = selected.parse_workflow_for_metadata(initial_path, contents, files)

        for path, message in workflow_validation.messages.items():
            _LOGGER.warning("%s: %s", path, message)

        return InspectionResult(
            language=selected,
            initial_path=initial_path,
            files=files,
            workflow_validation=workflow_validation,
            test_parameter_validation=test_validation,
            metadata=metadata,
        )

    def _resolve_config(self, root: str | Path | None) -> WfIndexConfig:
        if self._config is not None:
            return self._config
        return load_config(Path(root) if root is not None else Path.cwd())


def _by_name(languages: Dict[str, WorkflowLanguage], name: str) -> WorkflowLanguage:
    lowered = name.lower()
    if lowered in languages:
        return languages[lowered]
    # Short names (``SMK``) are accepted alongside registry names (``snakemake``).
    for language in languages.values():
        if language.short_name.lower() == lowered:
            return language
    raise ValueError(f"Language '{name}' is not enabled")


__all__ = ["InspectionResult", "WorkflowInspector"]
