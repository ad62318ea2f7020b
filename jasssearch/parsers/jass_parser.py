"""JASS declaration parser for jassdoc-style annotated files.

Entries are documented natives of the form::

    /**
    Creates a unit.
    @param id the unit type
    */
    native CreateUnit takes player id, integer unitid returns unit

Parsing happens in two passes over the text. The first pass isolates each
doc comment (up to its first ``*/``) together with the declaration directly
after it. The second pass pulls the name, parameters and return type out of
the isolated declaration.
"""

import logging
import re
from typing import Iterator, List, Optional, Tuple

from jasssearch.models import ApiEntry
from jasssearch.parsers.base import BaseParser

logger = logging.getLogger(__name__)

COMMENT_OPEN = "/**"
COMMENT_CLOSE = "*/"

# Whitespace ending in a line break, then the declaration at column zero.
DECLARATION_PATTERN = re.compile(
    r"\s*\nnative\s+\w+\s+takes\s+.*?\s+returns\s+\w+",
    re.DOTALL,
)

NAME_PATTERN = re.compile(r"native\s+(\w+)")
PARAMETERS_PATTERN = re.compile(r"takes\s+(.*?)\s+returns", re.DOTALL)
RETURN_TYPE_PATTERN = re.compile(r"returns\s+(\w+)")


class JassParser(BaseParser):
    """Parser for documented JASS natives."""

    def get_language(self) -> str:
        """Return the language this parser handles."""
        return "jass"

    def parse_text(self, text: str) -> List[ApiEntry]:
        """
        Extract every documented native from the text.

        Args:
            text: Declaration source, possibly several files joined by newlines

        Returns:
            Entries in source order. Empty if no documented native was found.
        """
        entries = [
            self._extract_entry(comment_end, block)
            for comment_end, block in self._iter_blocks(text)
        ]
        logger.debug(f"Extracted {len(entries)} entries from {len(text)} characters")
        return entries

    def _iter_blocks(self, text: str) -> Iterator[Tuple[int, str]]:
        """
        Yield each doc comment with the declaration that follows it.

        Yields:
            Tuples of (offset of the declaration within the block, block text)
        """
        pos = 0
        while True:
            start = text.find(COMMENT_OPEN, pos)
            if start == -1:
                return
            end = text.find(COMMENT_CLOSE, start + len(COMMENT_OPEN))
            if end == -1:
                return
            end += len(COMMENT_CLOSE)

            match = DECLARATION_PATTERN.match(text, end)
            if match is None:
                # Comment documents something other than a native
                pos = end
                continue

            yield end - start, text[start:match.end()]
            pos = match.end()

    def _extract_entry(self, comment_end: int, block: str) -> ApiEntry:
        """Build an entry from an isolated block, using sentinels for missing parts."""
        declaration = block[comment_end:]
        return ApiEntry.build(
            name=self._first_group(NAME_PATTERN, declaration),
            parameters=self._first_group(PARAMETERS_PATTERN, declaration),
            return_type=self._first_group(RETURN_TYPE_PATTERN, declaration),
            description=block,
        )

    @staticmethod
    def _first_group(pattern: re.Pattern, text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(1) if match else None
