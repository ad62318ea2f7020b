"""Styled rendering of a single entry for a detail panel."""

import html
import re
from dataclasses import dataclass
from typing import Callable

from rich.markup import escape as rich_escape

from jasssearch.models import ApiEntry

PRIMITIVE_TYPES = ("integer", "real", "boolean", "string", "unit", "player", "force", "nothing")

FUNCTION_NAME_PATTERN = re.compile(r"^(\w+)(?=\()")
TYPE_PATTERN = re.compile(r"\b(" + "|".join(PRIMITIVE_TYPES) + r")\b")
ANNOTATION_PATTERN = re.compile(r"@\w+")
COMMENT_DELIMITERS = ("/**", "*/")


@dataclass(frozen=True)
class MarkupStyle:
    """How a display surface marks up the three highlighted token kinds."""

    name: str
    function: str
    type: str
    annotation: str
    escape: Callable[[str], str]


RICH_STYLE = MarkupStyle(
    name="rich",
    function="[bold cyan]{}[/bold cyan]",
    type="[green]{}[/green]",
    annotation="[magenta]{}[/magenta]",
    escape=rich_escape,
)

HTML_STYLE = MarkupStyle(
    name="html",
    function='<span class="function">{}</span>',
    type='<span class="type">{}</span>',
    annotation='<span class="annotation">{}</span>',
    escape=lambda text: html.escape(text, quote=False),
)


@dataclass(frozen=True)
class DetailPayload:
    """Static, already-marked-up content for one entry."""

    title: str
    signature: str
    description: str
    style: str


class DetailRenderer:
    """Turns an ApiEntry into a DetailPayload in a given markup style."""

    def __init__(self, style: MarkupStyle = RICH_STYLE):
        self.style = style

    def render(self, entry: ApiEntry) -> DetailPayload:
        return DetailPayload(
            title=self.style.escape(entry.name),
            signature=self.render_signature(entry.signature),
            description=self.render_description(entry.description),
            style=self.style.name,
        )

    def render_signature(self, signature: str) -> str:
        """Mark up the leading function name and every primitive type keyword."""
        text = self.style.escape(signature)
        match = FUNCTION_NAME_PATTERN.match(text)
        if match:
            head = self.style.function.format(match.group(1))
            return head + self._mark_types(text[match.end():])
        return self._mark_types(text)

    def render_description(self, description: str) -> str:
        """Drop comment delimiter lines and mark up @annotations."""
        lines = []
        for line in description.split("\n"):
            line = line.rstrip()
            if line in COMMENT_DELIMITERS:
                continue
            line = self.style.escape(line)
            lines.append(ANNOTATION_PATTERN.sub(
                lambda m: self.style.annotation.format(m.group(0)), line
            ))
        return "\n".join(lines)

    def _mark_types(self, text: str) -> str:
        return TYPE_PATTERN.sub(lambda m: self.style.type.format(m.group(1)), text)
