"""Contract between a search session and the UI that hosts it."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from jasssearch.models import ApiEntry
from jasssearch.rendering.detail import DetailPayload


@dataclass(frozen=True)
class DisplayRow:
    """One row of the filterable list."""

    label: str
    description: str = ""
    detail: str = ""
    placeholder: bool = False  # Informational row that cannot be selected

    @classmethod
    def from_entry(cls, entry: ApiEntry) -> "DisplayRow":
        return cls(label=entry.name, description=entry.signature, detail=entry.summary)


LOADING_ROW = DisplayRow(label="Loading API documentation...", placeholder=True)
EMPTY_ROW = DisplayRow(
    label="No functions found",
    description="The documentation was fetched but contained no documented natives",
    placeholder=True,
)
NO_MATCHES_ROW = DisplayRow(label="No matching functions found", placeholder=True)


def fetch_failed_row(error: Exception) -> DisplayRow:
    """Placeholder shown when the documentation could not be fetched."""
    return DisplayRow(
        label="Failed to fetch API documentation",
        description=str(error),
        placeholder=True,
    )


class DisplaySurface(ABC):
    """A filterable list plus a read-only detail panel.

    The surface reports user activity by calling the session's
    ``on_query_change``, ``on_select`` and ``dismiss`` handlers, one event at
    a time.
    """

    @abstractmethod
    def set_busy(self, busy: bool) -> None:
        """Show or hide the busy indicator."""

    @abstractmethod
    def set_rows(self, rows: List[DisplayRow]) -> None:
        """Replace the rows currently listed."""

    @abstractmethod
    def show_detail(self, payload: DetailPayload) -> None:
        """Display a rendered entry in the detail panel."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the list. No further events are delivered."""
