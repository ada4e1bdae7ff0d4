import asyncio
from typing import Optional

import aiohttp

from statwatch.core.exceptions import BodyReadError, StatusError, TransportError
from statwatch.utils.logger import LoggerSetup


class StatsClient:
    """
    Async client for the server statistics endpoint using aiohttp.

    Each call to `fetch` is one attempt: a GET with a fixed total timeout,
    accepted only when the server answers 200 OK, followed by a full read of
    the body. Failures are classified into the poll error family so the
    caller can count them against its error budget.
    """

    def __init__(self, url: str, timeout: float = 5.0):
        self._url = url
        self._timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None
        self.logger = LoggerSetup.setup(__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )
        return self._session

    async def fetch(self) -> str:
        """
        Fetch the raw metrics payload once.

        Returns:
            str: Response body

        Raises:
            TransportError: Request could not be sent or timed out
            StatusError: Response status is not 200
            BodyReadError: Body could not be read
        """
        session = await self._get_session()

        try:
            response = await session.get(self._url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Error fetching {self._url}: {e!r}") from e

        async with response:
            if response.status != 200:
                raise StatusError(response.status, response.reason)

            try:
                body = await response.text()
            except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
                raise BodyReadError(f"Error reading response body: {e!r}") from e

        self.logger.debug(f"Fetched {len(body)} bytes from {self._url}")
        return body

    async def cleanup(self) -> None:
        """Cleanup resources"""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
