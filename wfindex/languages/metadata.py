"""Author and description extraction by directive prefix."""

from __future__ import annotations

from ..models import WorkflowMetadata
from .utils import second_token, split_lines


class DirectiveMetadataParser:
    """Reads ``author`` and ``description`` directives from descriptor text.

    ``separator`` splits the keyword from its value; ``None`` splits on
    whitespace and keeps only the first word of the value.
    """

    def __init__(self, separator: str | None = None) -> None:
        self._separator = separator

    def parse(self, contents: str) -> WorkflowMetadata:
        metadata = WorkflowMetadata()
        for line in split_lines(contents):
            if line.startswith("author"):
                value = second_token(line, self._separator)
                if value is not None:
                    metadata.author = value
            if line.startswith("description"):
                value = second_token(line, self._separator)
                if value is not None:
                    metadata.description = value
        return metadata


__all__ = ["DirectiveMetadataParser"]
