"""Properties every registered workflow language must satisfy."""

from __future__ import annotations

import pytest

from wfindex.languages import discover_languages
from wfindex.languages.base import WorkflowLanguage
from wfindex.models import GenericFileType
from tests._fixtures.readers import InMemoryFileReader

_PRIMARY = {
    "SMK": ("/workflow/Snakefile", "rule all:\n    input: []\n"),
    "SWL": ("/flow.swl", "author Ann\ndescription demo\n"),
}


@pytest.fixture(params=discover_languages(), ids=lambda language: language.short_name)
def language(request) -> WorkflowLanguage:
    return request.param


def test_index_contains_initial_path_verbatim(language: WorkflowLanguage) -> None:
    initial_path, contents = _PRIMARY[language.short_name]
    reader = InMemoryFileReader({initial_path: "stale copy on the host"})

    index = language.index_workflow_files(initial_path, contents, reader)

    assert index[initial_path].content == contents
    assert index[initial_path].role is GenericFileType.PRIMARY_DESCRIPTOR


def test_index_is_fresh_per_call(language: WorkflowLanguage) -> None:
    initial_path, contents = _PRIMARY[language.short_name]
    reader = InMemoryFileReader({initial_path: contents})

    first = language.index_workflow_files(initial_path, contents, reader)
    second = language.index_workflow_files(initial_path, contents, reader)

    assert first == second
    assert first is not second


def test_primary_path_is_recognised(language: WorkflowLanguage) -> None:
    initial_path, _ = _PRIMARY[language.short_name]

    assert language.matches_initial_path(initial_path)


def test_validation_never_raises_on_odd_input(language: WorkflowLanguage) -> None:
    for path in ("/", "/data.txt", "/workflow/Snakefile", "/x.swl"):
        validation = language.validate_workflow_set(path, "\n\r\n???", {})
        assert isinstance(validation.valid, bool)


def test_test_parameter_validation_is_always_valid(language: WorkflowLanguage) -> None:
    validation = language.validate_test_parameter_set({})

    assert validation.valid is True
    assert validation.messages == {}
