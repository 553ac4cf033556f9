"""Resolve user input into a thread query."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from hn2vast.config import HN_SCHEME, HN_URL_BASE
from hn2vast.schemas import ThreadQuery

_ITEM_ID_RE = re.compile(r"^\d+$")
_HN_HOSTS = {"news.ycombinator.com", "www.news.ycombinator.com"}


def parse_thread_input(input_text: str) -> ThreadQuery:
    """Parse ``hn:<id>``, an item URL, or a local file path.

    Raises:
        ValueError: For empty input, foreign hosts, credentials in the URL or
            a missing/non-numeric item id.
    """
    text = input_text.strip()
    if not text:
        raise ValueError("Input is empty")

    if text.startswith(HN_SCHEME):
        item_id = text[len(HN_SCHEME):].strip()
        return _remote_query(input_text, item_id)

    parsed = urlparse(text)
    if parsed.scheme in {"http", "https"}:
        if parsed.username or parsed.password:
            raise ValueError("URLs with credentials are not allowed")
        host = (parsed.hostname or "").lower()
        if host not in _HN_HOSTS:
            raise ValueError(f"Unsupported host: {host or text}")
        if parsed.path.rstrip("/") != "/item":
            raise ValueError(f"Not an item URL: {text}")
        item_ids = parse_qs(parsed.query).get("id", [])
        return _remote_query(input_text, item_ids[0] if item_ids else "")

    return ThreadQuery(input_text=input_text, source=text)


def _remote_query(input_text: str, item_id: str) -> ThreadQuery:
    if not _ITEM_ID_RE.match(item_id):
        raise ValueError(f"Invalid item id: {item_id!r}")
    return ThreadQuery(
        input_text=input_text,
        source=f"{HN_URL_BASE}{item_id}",
        item_id=item_id,
        is_remote=True,
    )
