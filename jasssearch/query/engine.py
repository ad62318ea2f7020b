import logging
from typing import Dict, List, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process, utils

from jasssearch.models import ApiEntry
from jasssearch.query.exceptions import QueryError
from jasssearch.query.models import SearchResult

logger = logging.getLogger(__name__)

DEFAULT_KEYS = ("name", "signature", "description")


class FuzzyIndex:
    """Typo-tolerant ranking of entries over several text fields.

    Scoring uses ``partial_ratio``, so where a match sits inside a field does
    not affect its score. The threshold follows the usual fuzzy-search
    convention: 0.0 accepts only exact matches, 1.0 accepts anything.
    """

    def __init__(
        self,
        entries: Sequence[ApiEntry],
        keys: Sequence[str] = DEFAULT_KEYS,
        threshold: float = 0.3,
        min_match_length: int = 2,
    ):
        """Build the index.

        Args:
            entries: Entries to search, in extraction order
            keys: ApiEntry attributes to match against
            threshold: Maximum dissimilarity accepted, in [0.0, 1.0]
            min_match_length: Shortest query (in characters) that can match

        Raises:
            QueryError: If the configuration is invalid
        """
        if not 0.0 <= threshold <= 1.0:
            raise QueryError(f"Threshold must be between 0 and 1, got {threshold}")
        if min_match_length < 1:
            raise QueryError(f"Minimum match length must be positive, got {min_match_length}")
        if not keys:
            raise QueryError("At least one search key is required")

        unknown = [key for key in keys if key not in ApiEntry.__dataclass_fields__]
        if unknown:
            raise QueryError(f"Unknown search keys: {', '.join(unknown)}")

        self.entries: Tuple[ApiEntry, ...] = tuple(entries)
        self.keys = tuple(keys)
        self.threshold = threshold
        self.min_match_length = min_match_length

        # Normalize once; queries are normalized the same way at search time
        self._fields: Dict[str, List[str]] = {
            key: [utils.default_process(getattr(entry, key)) for entry in self.entries]
            for key in self.keys
        }
        logger.debug(f"Indexed {len(self.entries)} entries on {', '.join(self.keys)}")

    @property
    def score_cutoff(self) -> float:
        """Minimum rapidfuzz score (0-100) a field needs to count as a match."""
        return (1.0 - self.threshold) * 100

    def __len__(self) -> int:
        return len(self.entries)

    def search(self, query: str, limit: Optional[int] = None) -> List[SearchResult]:
        """Rank entries against a query.

        Args:
            query: Free-text query
            limit: Maximum results to return (all when None)

        Returns:
            Results ordered by best field score, ties in extraction order
        """
        needle = utils.default_process(query)
        if len(needle) < self.min_match_length:
            return []

        best: Dict[int, Tuple[float, str]] = {}
        for key in self.keys:
            matches = process.extract(
                needle,
                self._fields[key],
                scorer=fuzz.partial_ratio,
                processor=None,
                score_cutoff=self.score_cutoff,
                limit=None,
            )
            for _, score, position in matches:
                if position not in best or score > best[position][0]:
                    best[position] = (score, key)

        ranked = sorted(best.items(), key=lambda item: (-item[1][0], item[0]))
        if limit is not None:
            ranked = ranked[:limit]

        return [
            SearchResult(
                entry=self.entries[position],
                score=score / 100.0,
                matched_key=key,
                position=position,
            )
            for position, (score, key) in ranked
        ]
