from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.readers import WorkflowRepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> WorkflowRepoBuilder:
    """Provide a reusable workflow repo builder rooted at the pytest tmp_path."""
    return WorkflowRepoBuilder(tmp_path)


@pytest.fixture
def rna_seq_repo(repo_builder: WorkflowRepoBuilder) -> WorkflowRepoBuilder:
    """A standardized Snakemake repository with nested workflow folders."""
    repo_builder.write(
        {
            "README.md": "# rna-seq-star-deseq2\n",
            "LICENSE": (
                "MIT License\n\nThe above copyright notice and this permission notice "
                "shall be included in all copies or substantial portions of the Software.\n"
            ),
            ".snakemake-workflow-catalog.yml": "usage:\n  mandatory-flags:\n    desc: none\n",
            "workflow/Snakefile": 'include: "rules/align.smk"\n\nrule all:\n    input: "results/counts.tsv"\n',
            "workflow/rules/align.smk": 'rule align:\n    wrapper: "v3.5.3/bio/star/align"\n',
            "workflow/rules/common.smk": "import pandas as pd\n",
            "workflow/envs/star.yaml": "channels: [bioconda]\n",
            "workflow/schemas/config.schema.yaml": "type: object\n",
            "workflow/scripts/count-matrix.py": "print('counts')\n",
            "workflow/scripts/helpers/deep.py": "print('too deep')\n",
            "config/config.yaml": "samples: config/samples.tsv\n",
            "config/samples.tsv": "sample\tcondition\n",
            "resources/adapters.fa": ">adapter\nACGT\n",
            ".tests/config_basic.yaml": "threads: 1\n",
        }
    )
    return repo_builder
