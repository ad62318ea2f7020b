"""Terminal display surface built on Rich."""

import logging
from typing import Callable, List, Optional

from rich.console import Console
from rich.prompt import Prompt

from jasssearch.cli.formatting import build_detail_panel, build_rows_table
from jasssearch.rendering import DetailPayload
from jasssearch.session import DisplayRow, DisplaySurface, SearchSession

logger = logging.getLogger(__name__)

COMMAND_PREFIX = ":"
QUIT_COMMANDS = {"q", "quit", "exit"}


class TerminalSurface(DisplaySurface):
    """Line-oriented stand-in for a filterable list widget.

    Every line typed at the prompt is a new query. ``:N`` selects row N and
    ``:q`` (or Ctrl-D) dismisses the session.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        prompt: Optional[Callable[[], str]] = None,
    ):
        self.console = console or Console()
        self._prompt = prompt or self._ask
        self.rows: List[DisplayRow] = []
        self.closed = False
        self._status = None

    def set_busy(self, busy: bool) -> None:
        if busy and self._status is None:
            self._status = self.console.status("Loading API documentation...")
            self._status.start()
        elif not busy:
            self._stop_status()

    def set_rows(self, rows: List[DisplayRow]) -> None:
        self.rows = rows
        if self._status is None:
            self.console.print(build_rows_table(rows))

    def show_detail(self, payload: DetailPayload) -> None:
        self.console.print(build_detail_panel(payload))

    def close(self) -> None:
        self._stop_status()
        self.closed = True

    def selectable_row(self, number: int) -> Optional[DisplayRow]:
        """Return the Nth (1-based) non-placeholder row, as numbered in the table."""
        selectable = [row for row in self.rows if not row.placeholder]
        if 1 <= number <= len(selectable):
            return selectable[number - 1]
        return None

    def run(self, session: SearchSession) -> None:
        """Deliver prompt input to the session until it closes."""
        while not self.closed:
            try:
                text = self._prompt()
            except (EOFError, KeyboardInterrupt):
                session.dismiss()
                break

            command = text.strip()
            if not command.startswith(COMMAND_PREFIX):
                session.on_query_change(text)
                continue

            argument = command[len(COMMAND_PREFIX):].strip()
            if argument.lower() in QUIT_COMMANDS:
                session.dismiss()
            elif argument.isdigit() and self.selectable_row(int(argument)):
                session.on_select(self.selectable_row(int(argument)))
            else:
                self.console.print(f"[red]Unknown command or row: {command}[/red]")

    def _ask(self) -> str:
        return Prompt.ask("[bold]Search API[/bold]", console=self.console, default="", show_default=False)

    def _stop_status(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
