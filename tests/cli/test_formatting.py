"""Tests for output formatting."""

import json
from io import StringIO

import pytest
from rich.console import Console

from jasssearch.cli.formatting import (
    build_detail_panel,
    format_entries_json,
    format_results_json,
    format_rows_table,
)
from jasssearch.models import ApiEntry
from jasssearch.query import FuzzyIndex
from jasssearch.rendering import DetailRenderer
from jasssearch.session import DisplayRow
from jasssearch.session.surface import NO_MATCHES_ROW


@pytest.fixture
def sample_entries():
    """Sample entries for testing."""
    return [
        ApiEntry.build(
            "GetUnitX", "unit whichUnit", "real",
            "/** Horizontal position */\nnative GetUnitX takes unit whichUnit returns real",
        ),
        ApiEntry.build(
            "KillUnit", "unit whichUnit", "nothing",
            "/**\nKills the unit.\n@param whichUnit victim\n*/\nnative KillUnit takes unit whichUnit returns nothing",
        ),
    ]


def test_format_rows_table(sample_entries):
    """Test table formatting with Rich table."""
    output = format_rows_table([DisplayRow.from_entry(e) for e in sample_entries])

    assert "GetUnitX" in output
    assert "KillUnit" in output
    assert "Horizontal position" in output


def test_format_rows_table_placeholder():
    """Test that placeholder rows are shown."""
    output = format_rows_table([NO_MATCHES_ROW])
    assert "No matching functions found" in output


def test_format_rows_table_empty():
    """Test table formatting with no rows."""
    assert "No results found" in format_rows_table([])


def test_format_results_json(sample_entries):
    """Test JSON formatting of ranked results."""
    results = FuzzyIndex(sample_entries).search("KillUnit")
    data = json.loads(format_results_json(results))

    assert data[0]["name"] == "KillUnit"
    assert data[0]["signature"] == "KillUnit(unit whichUnit): nothing"
    assert data[0]["score"] == 1.0
    assert data[0]["matched_key"] == "name"


def test_format_entries_json(sample_entries):
    """Test JSON formatting of unranked entries."""
    data = json.loads(format_entries_json(sample_entries))

    assert [item["name"] for item in data] == ["GetUnitX", "KillUnit"]
    assert data[0]["return_type"] == "real"


def test_build_detail_panel(sample_entries):
    """Test that the detail panel shows signature and prose without delimiters."""
    console = Console(file=StringIO(), width=100)
    console.print(build_detail_panel(DetailRenderer().render(sample_entries[1])))
    output = console.file.getvalue()

    assert "KillUnit" in output
    assert "Kills the unit." in output
    assert "@param" in output
    assert "[magenta]" not in output
