"""Tests for the ApiEntry model."""

import dataclasses

import pytest

from jasssearch.models import NOTHING, UNKNOWN_NAME, ApiEntry


def test_build_derives_signature():
    """Test that the signature is assembled from its parts."""
    entry = ApiEntry.build("GetUnitX", "unit whichUnit", "real", "/** doc */")
    assert entry.signature == "GetUnitX(unit whichUnit): real"


def test_build_uses_sentinels():
    """Test sentinel fallbacks for missing parts."""
    entry = ApiEntry.build(None, None, None, "block")

    assert entry.name == UNKNOWN_NAME
    assert entry.parameters == NOTHING
    assert entry.return_type == NOTHING
    assert entry.signature == f"{UNKNOWN_NAME}(nothing): nothing"


def test_build_strips_blank_parameters():
    """Test that whitespace-only parameters become 'nothing'."""
    entry = ApiEntry.build("Foo", "   \n ", "integer", "block")
    assert entry.signature == "Foo(nothing): integer"


def test_entry_is_immutable():
    """Test that entries cannot be modified after construction."""
    entry = ApiEntry.build("Foo", "nothing", "nothing", "block")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "Bar"


def test_summary_first_prose_line():
    """Test summary extraction from a multi-line comment."""
    description = "/**\nCreates a unit.\n\n@param id owner\n*/\nnative CreateUnit takes player id returns unit"
    entry = ApiEntry.build("CreateUnit", "player id", "unit", description)
    assert entry.summary == "Creates a unit."


def test_summary_single_line_comment():
    """Test summary of a one-line doc comment."""
    entry = ApiEntry.build("Foo", "nothing", "nothing", "/** doc */\nnative Foo takes nothing returns nothing")
    assert entry.summary == "doc"


def test_summary_empty_when_only_annotations():
    """Test that annotation-only comments have no summary."""
    entry = ApiEntry.build("Foo", "nothing", "nothing", "/**\n@pure\n*/\nnative Foo takes nothing returns nothing")
    assert entry.summary == ""


def test_str_is_signature():
    """Test human-readable representation."""
    entry = ApiEntry.build("Foo", "integer a", "boolean", "block")
    assert str(entry) == "Foo(integer a): boolean"
