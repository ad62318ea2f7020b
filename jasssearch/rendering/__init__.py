"""Detail rendering for a selected entry."""

from jasssearch.rendering.detail import (
    HTML_STYLE,
    PRIMITIVE_TYPES,
    RICH_STYLE,
    DetailPayload,
    DetailRenderer,
    MarkupStyle,
)
from jasssearch.rendering.page import render_html_document

__all__ = [
    "DetailPayload",
    "DetailRenderer",
    "MarkupStyle",
    "HTML_STYLE",
    "RICH_STYLE",
    "PRIMITIVE_TYPES",
    "render_html_document",
]
