"""Silly workflow language: the minimal import/author/description grammar."""

from __future__ import annotations

from .base import ConventionLanguage, LanguagePolicy
from .conventions import ImportDirectiveIndexer
from .metadata import DirectiveMetadataParser
from .rules import KeywordLineRule

SWL_KEYWORDS = ("import", "author", "description")

SWL_POLICY = LanguagePolicy.compile(
    short_name="SWL",
    long_name="Silly workflow language",
    descriptor_language="SWL",
    path_pattern=r"/.*\.swl",
    indexer=ImportDirectiveIndexer("import"),
    rules=(KeywordLineRule(SWL_KEYWORDS),),
    metadata_parser=DirectiveMetadataParser(),
)


class SillyWorkflowLanguage(ConventionLanguage):
    """Reference language: every line is an ``import``, ``author`` or ``description`` directive."""

    def __init__(self) -> None:
        super().__init__(SWL_POLICY)


__all__ = ["SWL_KEYWORDS", "SWL_POLICY", "SillyWorkflowLanguage"]
