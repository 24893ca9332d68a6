import asyncio
import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class ReachabilityChecker:
    """
    Probes whether a URL answers successfully within a bounded time.

    A ``HEAD`` request is sent first; servers answering ``405 Method Not Allowed``
    get exactly one streamed ``GET`` (the body is never read). The time bound
    covers both requests. Every failure mode resolves to ``False``.
    """

    def __init__(self, client: httpx.AsyncClient, timeout: float = DEFAULT_TIMEOUT):
        self._client: httpx.AsyncClient = client
        self._timeout: float = timeout

    async def is_reachable(self, url: str) -> bool:
        try:
            async with asyncio.timeout(self._timeout):
                return await self._probe(url)
        except TimeoutError:
            logger.debug('Reachability check timed out after %ss: %s', self._timeout, url)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.debug('Reachability check failed for %s: %r', url, e)
        return False

    async def _probe(self, url: str) -> bool:
        response = await self._client.head(url, follow_redirects=True)
        if response.is_success:
            return True
        if response.status_code != httpx.codes.METHOD_NOT_ALLOWED:
            logger.debug('HEAD %s answered %s', url, response.status_code)
            return False

        async with self._client.stream('GET', url, follow_redirects=True) as retry:
            return retry.is_success

    async def __call__(self, url: str) -> bool:
        return await self.is_reachable(url)
