from dataclasses import dataclass

from jasssearch.models import ApiEntry


@dataclass
class SearchResult:
    """Represents a single ranked match from the fuzzy index."""

    entry: ApiEntry
    score: float                     # [0.0, 1.0], higher is better
    matched_key: str                 # name, signature or description
    position: int                    # index of the entry in extraction order

    @property
    def name(self) -> str:
        return self.entry.name

    def __str__(self) -> str:
        """Human-readable representation for CLI output."""
        return f"{self.entry.signature} [{self.matched_key}: {self.score:.3f}]"
