"""Concurrent retrieval of remote declaration files."""

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from jasssearch.loader.exceptions import FetchFailure

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Fetches every source URL at once and returns all bodies or nothing."""

    def __init__(
        self,
        urls: Sequence[str],
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the loader.

        Args:
            urls: Ordered source URLs
            timeout: Per-request timeout in seconds
            client: Optional preconfigured client. When omitted a client is
                    created and closed for each load.
        """
        self.urls = list(urls)
        self.timeout = timeout
        self._client = client

    async def load(self) -> List[str]:
        """Fetch all sources concurrently.

        Returns:
            Response bodies in the order of ``urls``

        Raises:
            FetchFailure: If any single request fails
        """
        if not self.urls:
            return []

        if self._client is not None:
            return await self._fetch_all(self._client)

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            return await self._fetch_all(client)

    async def _fetch_all(self, client: httpx.AsyncClient) -> List[str]:
        logger.debug(f"Fetching {len(self.urls)} documentation sources")
        results = await asyncio.gather(
            *(self._fetch_one(client, url) for url in self.urls),
            return_exceptions=True,
        )

        for result in results:
            if isinstance(result, FetchFailure):
                raise result
            if isinstance(result, BaseException):
                raise FetchFailure(f"Failed to fetch API documentation: {result}", cause=result)

        logger.debug(f"Fetched {sum(len(body) for body in results)} characters")
        return results

    async def _fetch_one(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchFailure(
                f"Failed to fetch {url}: HTTP {e.response.status_code}", url=url, cause=e
            ) from e
        except httpx.HTTPError as e:
            raise FetchFailure(f"Failed to fetch {url}: {e}", url=url, cause=e) from e

        return response.text


class LocalDocumentLoader:
    """Reads declaration files from disk with the same contract as DocumentLoader."""

    def __init__(self, paths: Sequence[str]):
        self.paths = [str(path) for path in paths]

    async def load(self) -> List[str]:
        """Read every file, in order.

        Raises:
            FetchFailure: If any file cannot be read
        """
        texts = []
        for path in self.paths:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    texts.append(f.read())
            except (OSError, UnicodeDecodeError) as e:
                raise FetchFailure(f"Failed to read {path}: {e}", url=path, cause=e) from e
        logger.debug(f"Read {len(texts)} local documentation files")
        return texts
