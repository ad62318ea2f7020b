"""Tests for detail rendering."""

import pytest

from jasssearch.models import ApiEntry
from jasssearch.rendering import (
    HTML_STYLE,
    RICH_STYLE,
    DetailPayload,
    DetailRenderer,
    render_html_document,
)


DESCRIPTION = (
    "/**\n"
    "Creates a unit.   \n"
    "@param id The owner\n"
    "@async\n"
    "*/\n"
    "native CreateUnit takes player id, integer unitid returns unit"
)


@pytest.fixture
def entry():
    return ApiEntry.build("CreateUnit", "player id, integer unitid", "unit", DESCRIPTION)


class TestHtmlStyle:
    """Rendering with HTML markers."""

    @pytest.fixture
    def renderer(self):
        return DetailRenderer(HTML_STYLE)

    def test_function_name_marked(self, renderer, entry):
        """Test that the leading identifier is marked as a function."""
        signature = renderer.render_signature(entry.signature)
        assert signature.startswith('<span class="function">CreateUnit</span>(')

    def test_types_marked(self, renderer, entry):
        """Test that every primitive type keyword is marked."""
        signature = renderer.render_signature(entry.signature)

        assert '<span class="type">player</span> id' in signature
        assert '<span class="type">integer</span> unitid' in signature
        assert signature.endswith(': <span class="type">unit</span>')

    def test_types_match_whole_words_only(self, renderer):
        """Test that identifiers containing a type name are left alone."""
        signature = renderer.render_signature("SetUnitX(unit whichUnit, real newX): nothing")

        assert "whichUnit" in signature
        assert '<span class="type">nothing</span>' in signature
        assert signature.count('class="type"') == 3

    def test_nothing_signature(self, renderer):
        """Test a signature with no parameters."""
        signature = renderer.render_signature("Baz(nothing): nothing")
        assert signature.count('<span class="type">nothing</span>') == 2

    def test_description_drops_delimiters(self, renderer, entry):
        """Test that /** and */ lines are removed."""
        lines = renderer.render_description(entry.description).split("\n")

        assert "/**" not in lines
        assert "*/" not in lines
        assert lines[0] == "Creates a unit."
        assert lines[-1].startswith("native CreateUnit")

    def test_description_keeps_indented_delimiters(self, renderer):
        """Test that only unindented delimiter lines are dropped."""
        description = renderer.render_description("/**\nFirst\n   */\n*/  ")

        assert description.split("\n") == ["First", "   */"]

    def test_description_marks_annotations(self, renderer, entry):
        """Test that @word tokens are marked."""
        description = renderer.render_description(entry.description)

        assert '<span class="annotation">@param</span> id The owner' in description
        assert '<span class="annotation">@async</span>' in description

    def test_description_escapes_markup(self, renderer):
        """Test that raw text cannot inject markup."""
        description = renderer.render_description("/**\nReturns a < b & c\n*/")
        assert description == "Returns a &lt; b &amp; c"

    def test_render_payload(self, renderer, entry):
        """Test the full payload."""
        payload = renderer.render(entry)

        assert isinstance(payload, DetailPayload)
        assert payload.title == "CreateUnit"
        assert payload.style == "html"

    def test_html_document(self, renderer, entry):
        """Test the standalone page is static and contains the payload."""
        page = render_html_document(renderer.render(entry))

        assert page.startswith("<!DOCTYPE html>")
        assert "<title>CreateUnit</title>" in page
        assert '<span class="function">CreateUnit</span>' in page
        assert "<script" not in page

    def test_html_document_rejects_rich_payload(self, entry):
        """Test that only HTML payloads can be wrapped in a page."""
        with pytest.raises(ValueError):
            render_html_document(DetailRenderer(RICH_STYLE).render(entry))


class TestRichStyle:
    """Rendering with Rich console markup."""

    def test_default_style_is_rich(self, entry):
        """Test default renderer markup."""
        payload = DetailRenderer().render(entry)

        assert payload.style == "rich"
        assert payload.signature.startswith("[bold cyan]CreateUnit[/bold cyan](")
        assert "[green]integer[/green]" in payload.signature
        assert "[magenta]@param[/magenta]" in payload.description

    def test_brackets_are_escaped(self):
        """Test that literal brackets do not become Rich tags."""
        description = DetailRenderer().render_description("/**\nSee [red] for details\n*/")
        assert description == "See \\[red] for details"
