"""Interactive search sessions and the display surface they drive."""

from jasssearch.session.cancellation import CancellationToken
from jasssearch.session.session import (
    DEFAULT_DISPLAY_LIMIT,
    SearchLauncher,
    SearchSession,
    SessionState,
)
from jasssearch.session.surface import DisplayRow, DisplaySurface

__all__ = [
    "CancellationToken",
    "DEFAULT_DISPLAY_LIMIT",
    "DisplayRow",
    "DisplaySurface",
    "SearchLauncher",
    "SearchSession",
    "SessionState",
]
