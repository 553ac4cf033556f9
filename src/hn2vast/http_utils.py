"""HTTP utilities for fetching item pages with retries."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Final

import httpx

from hn2vast.config import (
    HN2VAST_FETCH_BACKOFF_S,
    HN2VAST_FETCH_MAX_RETRIES,
    HN2VAST_FETCH_TIMEOUT_S,
    HN2VAST_USER_AGENT,
)
from hn2vast.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """GET ``url`` and return its text, retrying transient failures.

    Status codes in ``RETRY_STATUS_CODES`` and transport errors are retried
    up to ``HN2VAST_FETCH_MAX_RETRIES`` times with exponential backoff. A 404
    is final and raises ``on_404`` (``FetchError`` by default).

    Raises:
        FetchError: When every attempt failed.
    """
    attempts = HN2VAST_FETCH_MAX_RETRIES + 1
    failure: Exception | None = None

    async with _client_scope(client) as http_client:
        for attempt in range(attempts):
            if attempt:
                delay = _retry_delay(attempt)
                logger.debug("Retrying %s in %.2fs: %s", url, delay, failure)
                await asyncio.sleep(delay)

            try:
                response = await http_client.get(url)
            except httpx.RequestError as exc:
                failure = exc
                continue

            if response.status_code == 404:
                raise (on_404 or FetchError)(
                    on_404_message or f"Resource not found at {url}"
                )
            if response.status_code in RETRY_STATUS_CODES:
                failure = FetchError(f"HTTP {response.status_code} from {url}")
                continue

            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                failure = exc
                continue
            return response.text

    raise FetchError(f"Failed to fetch {url} after {attempts} attempts: {failure}")


def _retry_delay(attempt: int) -> float:
    """Backoff before the given (1-based) retry."""
    return HN2VAST_FETCH_BACKOFF_S * (2 ** (attempt - 1))


@asynccontextmanager
async def _client_scope(
    client: httpx.AsyncClient | None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` as-is, or a short-lived client with project defaults."""
    if client is not None:
        yield client
        return

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(HN2VAST_FETCH_TIMEOUT_S),
        headers={"User-Agent": HN2VAST_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        yield new_client
