"""Base parser abstraction for declaration-file formats."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from jasssearch.models import ApiEntry


class BaseParser(ABC):
    """Abstract base class for declaration parsers."""

    @abstractmethod
    def parse_text(self, text: str) -> List[ApiEntry]:
        """
        Parse declaration text and extract documented entries.

        Args:
            text: Full contents of one or more declaration files

        Returns:
            List of ApiEntry objects in the order they appear in the text
        """
        pass

    @abstractmethod
    def get_language(self) -> str:
        """
        Return the language this parser handles.

        Returns:
            Language name (e.g., 'jass')
        """
        pass

    def parse_texts(self, texts: Iterable[str]) -> List[ApiEntry]:
        """Parse several declaration files as one newline-joined text."""
        return self.parse_text("\n".join(texts))
