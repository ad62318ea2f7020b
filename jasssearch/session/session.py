"""Interactive search session: load, rank on every keystroke, render on select."""

import logging
from enum import Enum
from typing import Callable, List, Optional, Union

from jasssearch.loader import DocumentLoader, FetchFailure, LocalDocumentLoader
from jasssearch.models import ApiEntry
from jasssearch.parsers import BaseParser, JassParser
from jasssearch.query import DEFAULT_KEYS, FuzzyIndex
from jasssearch.rendering import DetailRenderer
from jasssearch.session.cancellation import CancellationToken
from jasssearch.session.surface import (
    EMPTY_ROW,
    LOADING_ROW,
    NO_MATCHES_ROW,
    DisplayRow,
    DisplaySurface,
    fetch_failed_row,
)

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_LIMIT = 200


class SessionState(Enum):
    """Lifecycle states of a search session."""

    LOADING = "loading"
    READY = "ready"
    SEARCHING = "searching"
    SELECTED = "selected"
    INERT = "inert"  # Load failed or found nothing; only dismissal remains
    CLOSED = "closed"


class SearchSession:
    """One invocation of the search command, from trigger to dismissal."""

    def __init__(
        self,
        surface: DisplaySurface,
        loader: Union[DocumentLoader, LocalDocumentLoader],
        parser: Optional[BaseParser] = None,
        renderer: Optional[DetailRenderer] = None,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
        threshold: float = 0.3,
        min_match_length: int = 2,
        token: Optional[CancellationToken] = None,
    ):
        self.surface = surface
        self.loader = loader
        self.parser = parser or JassParser()
        self.renderer = renderer or DetailRenderer()
        self.display_limit = display_limit
        self.threshold = threshold
        self.min_match_length = min_match_length
        self.token = token or CancellationToken()

        self.state = SessionState.LOADING
        self.entries: List[ApiEntry] = []
        self.index: Optional[FuzzyIndex] = None
        self.query = ""
        self.rows: List[DisplayRow] = []
        self._view: List[ApiEntry] = []

    @property
    def is_closed(self) -> bool:
        return self.state is SessionState.CLOSED or self.token.cancelled

    async def start(self) -> SessionState:
        """Load and parse the documentation, then show the initial list.

        Returns:
            The state the session settled in (READY, INERT or CLOSED)
        """
        if self.is_closed:
            return self.state

        self.state = SessionState.LOADING
        self.surface.set_busy(True)
        self._show_rows([LOADING_ROW])

        try:
            texts = await self.loader.load()
        except FetchFailure as e:
            if self.is_closed:
                return self.state
            logger.warning(f"Documentation fetch failed: {e}")
            self._become_inert(fetch_failed_row(e))
            return self.state
        except Exception as e:
            if self.is_closed:
                return self.state
            logger.exception("Unexpected error while loading documentation")
            self._become_inert(fetch_failed_row(e))
            return self.state

        if self.is_closed:
            logger.debug("Session closed before documentation arrived, discarding it")
            return self.state

        try:
            entries = self.parser.parse_texts(texts)
        except Exception as e:
            logger.exception("Failed to parse documentation")
            self._become_inert(fetch_failed_row(e))
            return self.state

        if not entries:
            self._become_inert(EMPTY_ROW)
            return self.state

        self.entries = entries
        self.index = FuzzyIndex(
            entries,
            keys=DEFAULT_KEYS,
            threshold=self.threshold,
            min_match_length=self.min_match_length,
        )
        self.surface.set_busy(False)
        self.state = SessionState.READY
        self._show_entries(self.entries)
        return self.state

    def on_query_change(self, text: str) -> None:
        """Re-rank the list for the new query text."""
        if self.index is None or self.state is not SessionState.READY:
            return

        self.state = SessionState.SEARCHING
        self.query = text
        query = text.strip()

        if not query:
            self._show_entries(self.entries)
        else:
            results = self.index.search(query)
            if results:
                self._show_entries([result.entry for result in results])
            else:
                self._view = []
                self._show_rows([NO_MATCHES_ROW])

        self.state = SessionState.READY

    def on_select(self, row: DisplayRow) -> Optional[ApiEntry]:
        """Render the entry behind a row and end the session.

        Returns:
            The selected entry, or None if the row maps to no entry
        """
        if self.state is not SessionState.READY or row.placeholder:
            return None

        entry = next((e for e in self._view if e.name == row.label), None)
        if entry is None:
            logger.debug(f"No displayed entry named '{row.label}'")
            return None

        self.state = SessionState.SELECTED
        self.surface.show_detail(self.renderer.render(entry))
        self.dismiss()
        return entry

    def dismiss(self) -> None:
        """Close the surface and release everything the session holds."""
        if self.state is SessionState.CLOSED:
            return

        self.token.cancel()
        self.state = SessionState.CLOSED
        self.surface.close()
        self.index = None
        self.entries = []
        self._view = []
        self.rows = []

    def _become_inert(self, row: DisplayRow) -> None:
        self.surface.set_busy(False)
        self.state = SessionState.INERT
        self._show_rows([row])

    def _show_entries(self, entries: List[ApiEntry]) -> None:
        self._view = entries[:self.display_limit]
        self._show_rows([DisplayRow.from_entry(entry) for entry in self._view])

    def _show_rows(self, rows: List[DisplayRow]) -> None:
        self.rows = rows
        self.surface.set_rows(rows)


class SearchLauncher:
    """The search command: starts a fresh session, abandoning the previous one."""

    def __init__(self, session_factory: Callable[[CancellationToken], SearchSession]):
        self.session_factory = session_factory
        self.generation = 0
        self.active: Optional[SearchSession] = None

    async def launch(self) -> SearchSession:
        if self.active is not None:
            self.active.dismiss()

        self.generation += 1
        logger.debug(f"Starting search session #{self.generation}")
        session = self.session_factory(CancellationToken())
        self.active = session
        await session.start()
        return session
