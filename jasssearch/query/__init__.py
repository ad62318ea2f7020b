"""Fuzzy search over extracted entries."""

from jasssearch.query.engine import DEFAULT_KEYS, FuzzyIndex
from jasssearch.query.models import SearchResult
from jasssearch.query.exceptions import QueryError

__all__ = [
    "DEFAULT_KEYS",
    "FuzzyIndex",
    "SearchResult",
    "QueryError",
]
