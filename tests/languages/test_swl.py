"""Tests for the silly workflow language."""

from __future__ import annotations

import pytest

from wfindex.languages.rules import UNKNOWN_KEYWORD_MESSAGE
from wfindex.languages.swl import SillyWorkflowLanguage
from wfindex.models import GenericFileType
from tests._fixtures.readers import InMemoryFileReader

INITIAL_PATH = "/main.swl"
DESCRIPTOR = "import foo.swl\nauthor Ann\ndescription X"


def test_import_directive_pulls_in_named_file() -> None:
    reader = InMemoryFileReader({"foo.swl": "author Bob\n"})

    index = SillyWorkflowLanguage().index_workflow_files(INITIAL_PATH, DESCRIPTOR, reader)

    assert set(index) == {INITIAL_PATH, "foo.swl"}
    imported = [record for record in index.values() if record.role is GenericFileType.IMPORTED_DESCRIPTOR]
    assert len(imported) == 1
    assert imported[0].content == "author Bob\n"
    assert index[INITIAL_PATH].content == DESCRIPTOR
    assert index[INITIAL_PATH].role is GenericFileType.PRIMARY_DESCRIPTOR


def test_imports_are_not_followed_recursively() -> None:
    reader = InMemoryFileReader({"foo.swl": "import bar.swl\n", "bar.swl": "author Bob\n"})

    index = SillyWorkflowLanguage().index_workflow_files(INITIAL_PATH, DESCRIPTOR, reader)

    assert "bar.swl" not in index
    assert reader.read_calls == ["foo.swl"]


def test_import_indexing_performs_no_listing() -> None:
    reader = InMemoryFileReader({"foo.swl": ""})

    SillyWorkflowLanguage().index_workflow_files(INITIAL_PATH, DESCRIPTOR, reader)

    assert reader.list_calls == []


def test_missing_import_is_fatal() -> None:
    reader = InMemoryFileReader({})

    with pytest.raises(FileNotFoundError):
        SillyWorkflowLanguage().index_workflow_files(INITIAL_PATH, DESCRIPTOR, reader)


def test_import_without_target_is_ignored() -> None:
    reader = InMemoryFileReader({})

    index = SillyWorkflowLanguage().index_workflow_files(INITIAL_PATH, "import\nauthor Ann", reader)

    assert set(index) == {INITIAL_PATH}


def test_known_keywords_are_valid() -> None:
    validation = SillyWorkflowLanguage().validate_workflow_set(INITIAL_PATH, DESCRIPTOR, {})

    assert validation.valid is True
    assert validation.messages == {}


def test_trailing_newlines_and_crlf_are_accepted() -> None:
    language = SillyWorkflowLanguage()

    assert language.validate_workflow_set(INITIAL_PATH, "import a.swl\r\nauthor Ann\n\n", {}).valid


def test_unknown_keyword_messages_overwrite_each_other() -> None:
    contents = "import foo.swl\nrun everything\n\nstep two"

    validation = SillyWorkflowLanguage().validate_workflow_set(INITIAL_PATH, contents, {})

    assert validation.valid is False
    assert validation.messages == {INITIAL_PATH: UNKNOWN_KEYWORD_MESSAGE}


def test_empty_descriptor_is_invalid() -> None:
    validation = SillyWorkflowLanguage().validate_workflow_set(INITIAL_PATH, "", {})

    assert validation.valid is False


def test_metadata_uses_first_word_after_directive() -> None:
    metadata = SillyWorkflowLanguage().parse_workflow_for_metadata(INITIAL_PATH, DESCRIPTOR, {})

    assert metadata.author == "Ann"
    assert metadata.description == "X"


def test_initial_path_pattern_requires_swl_extension() -> None:
    language = SillyWorkflowLanguage()

    assert language.matches_initial_path("/main.swl")
    assert language.matches_initial_path("/nested/dir/flow.swl")
    assert not language.matches_initial_path("main.swl")
    assert not language.matches_initial_path("/workflow/Snakefile")


def test_names_and_trivial_operations() -> None:
    language = SillyWorkflowLanguage()

    assert language.short_name == "SWL"
    assert language.long_name == "Silly workflow language"
    assert language.launch_instructions("#workflow/swl") is None
    assert language.validate_test_parameter_set({}).valid is True
