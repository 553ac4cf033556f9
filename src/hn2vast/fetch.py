"""Fetch and cache Hacker News item pages."""

from __future__ import annotations

import logging
from pathlib import Path

from hn2vast.cache_utils import (
    cache_dir_for,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    write_text_async,
)
from hn2vast.config import (
    CACHED_HTML_FILE,
    HN2VAST_CACHE_PATH,
    HN2VAST_CACHE_TTL_SECONDS,
)
from hn2vast.exceptions import ItemNotFoundError
from hn2vast.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)


async def fetch_item_html(
    url: str,
    *,
    item_id: str,
    use_cache: bool = True,
    cache_path: Path | None = None,
) -> str:
    """Fetch an item page and cache it locally.

    Args:
        url: Item page URL.
        item_id: The numeric item identifier, used as the cache key.
        use_cache: Whether to use cached HTML if available.
        cache_path: Base cache directory. Defaults to ``HN2VAST_CACHE_PATH``.

    Returns:
        The HTML content as a string.

    Raises:
        ItemNotFoundError: If the item page does not exist.
        FetchError: If a network error persists after retries.
    """
    cache_dir = cache_dir_for(item_id, cache_path or HN2VAST_CACHE_PATH)
    html_path = cache_dir / CACHED_HTML_FILE

    if use_cache and is_cache_fresh(html_path, HN2VAST_CACHE_TTL_SECONDS):
        logger.debug("Using cached page %s for %s", html_path, url)
        return await read_text_async(html_path)

    html_text = await fetch_with_retries(
        url,
        on_404=ItemNotFoundError,
        on_404_message=f"Item {item_id} not found at {url}",
    )
    await mkdir_async(cache_dir, parents=True, exist_ok=True)
    await write_text_async(html_path, html_text)
    logger.debug("Cached %s at %s", url, html_path)
    return html_text
