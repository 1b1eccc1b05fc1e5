"""Snakemake repositories following the standardized workflow layout.

Layout notes: https://snakemake.readthedocs.io/en/stable/snakefiles/deployment.html
and https://github.com/snakemake/snakemake-workflow-catalog
"""

from __future__ import annotations

import re

from .base import ConventionLanguage, LanguagePolicy
from .conventions import FolderConventionIndexer, ScanStep
from .metadata import DirectiveMetadataParser
from .rules import MarkerFileRule, PathShapeRule

SNAKEMAKE_WORKFLOW_CATALOG_YML = ".snakemake-workflow-catalog.yml"
INVALID_INITIAL_PATH_MESSAGE = (
    "Primary descriptor must be a Snakefile at the repository root or in the workflow folder"
)

WORKFLOW_FOLDER = "workflow"
ENTRY_POINT = f"/{WORKFLOW_FOLDER}/Snakefile"
CANONICAL_PATHS = ("/Snakefile", ENTRY_POINT)

# Nested folders are only worth listing when the entry point sits in workflow/.
_WORKFLOW_SUBFOLDERS = ("envs", "report", "rules", "schemas", "scripts", "notebooks")

SNAKEMAKE_LAYOUT = (
    # licenses, readmes and the catalog file live at the root
    ScanStep(None),
    ScanStep(WORKFLOW_FOLDER),
    *(
        ScanStep(f"{WORKFLOW_FOLDER}/{name}", requires=ENTRY_POINT)
        for name in _WORKFLOW_SUBFOLDERS
    ),
    ScanStep("config"),
    ScanStep("resources"),
    ScanStep(".tests"),
)

SNAKEMAKE_POLICY = LanguagePolicy.compile(
    short_name="SMK",
    long_name="Snakemake",
    descriptor_language="SMK",
    path_pattern=r"(/workflow)?/snakefile",
    flags=re.IGNORECASE,
    # TODO: read the real Snakemake version once descriptors declare one.
    indexer=FolderConventionIndexer(
        SNAKEMAKE_LAYOUT, entry_folder=WORKFLOW_FOLDER, primary_version="1.0"
    ),
    rules=(
        PathShapeRule(CANONICAL_PATHS, INVALID_INITIAL_PATH_MESSAGE),
        MarkerFileRule(SNAKEMAKE_WORKFLOW_CATALOG_YML),
    ),
    metadata_parser=DirectiveMetadataParser(":"),
)


class SnakemakeLanguage(ConventionLanguage):
    """Indexes ``workflow/``, ``config/``, ``resources/`` and ``.tests/`` around a Snakefile."""

    def __init__(self) -> None:
        super().__init__(SNAKEMAKE_POLICY)


__all__ = [
    "CANONICAL_PATHS",
    "INVALID_INITIAL_PATH_MESSAGE",
    "SNAKEMAKE_LAYOUT",
    "SNAKEMAKE_POLICY",
    "SNAKEMAKE_WORKFLOW_CATALOG_YML",
    "SnakemakeLanguage",
]
