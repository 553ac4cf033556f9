"""Integration tests against the live site.

Run with: pytest -m integration
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from hn2vast.ingestion import IngestionOptions, ingest_thread

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_live_item_converts(tmp_path: Path, network_timeout: float) -> None:
    """A well-known item converts into a non-empty topic."""
    document = await asyncio.wait_for(
        ingest_thread(
            "hn:8863",
            options=IngestionOptions(use_cache=False, cache_path=tmp_path),
        ),
        timeout=network_timeout,
    )

    assert document.source == "https://news.ycombinator.com/item?id=8863"
    assert document.vast.kind == "topic"
    assert document.vast.children
    assert (tmp_path / "item_8863" / "index.html").is_file()
