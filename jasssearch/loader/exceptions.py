from typing import Optional


class FetchFailure(Exception):
    """Raised when any documentation source could not be fetched."""

    def __init__(self, message: str, url: Optional[str] = None, cause: Exception = None):
        super().__init__(message)
        self.url = url
        self.cause = cause
