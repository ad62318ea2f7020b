"""Loading of remote declaration files."""

from jasssearch.loader.exceptions import FetchFailure
from jasssearch.loader.fetcher import DocumentLoader, LocalDocumentLoader

__all__ = ["DocumentLoader", "LocalDocumentLoader", "FetchFailure"]
