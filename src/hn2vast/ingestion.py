"""Ingestion pipeline for Hacker News threads -> VAST."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from hn2vast.cache_utils import read_text_async
from hn2vast.fetch import fetch_item_html
from hn2vast.html_parser import extract_comments
from hn2vast.html_utils import parse_html
from hn2vast.nesting import count_comments, max_depth, nest_comments
from hn2vast.output_formatter import format_vast_file
from hn2vast.projection import make_topic_node
from hn2vast.query_parser import parse_thread_input
from hn2vast.schemas import VastFile

logger = logging.getLogger(__name__)


@dataclass
class IngestionOptions:
    """Options for thread ingestion.

    Attributes:
        use_cache: If True, reuse a fresh cached copy of a remote page.
        cache_path: Directory for downloaded pages. Defaults to the configured
            cache path.
    """

    use_cache: bool = True
    cache_path: Path | None = None


async def ingest_thread(
    input_text: str,
    *,
    options: IngestionOptions | None = None,
    timestamp: datetime | None = None,
) -> VastFile:
    """Resolve, load and convert a thread into a VAST document.

    Args:
        input_text: ``hn:<id>``, an item URL or a path to a saved page.
        options: Processing options. Uses defaults if None.
        timestamp: Generation time to record. Defaults to now.

    Raises:
        ValueError: If the input cannot be resolved.
        FileNotFoundError: If a local page does not exist.
        FetchError: If a remote page cannot be downloaded.
        ParseError: If a comment on the page is malformed.
    """
    opts = options or IngestionOptions()
    query = parse_thread_input(input_text)

    if query.is_remote:
        html = await fetch_item_html(
            query.source,
            item_id=query.item_id or "",
            use_cache=opts.use_cache,
            cache_path=opts.cache_path,
        )
    else:
        path = Path(query.source).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"HTML file not found: {path}")
        html = await read_text_async(path)

    return convert_html_to_vast(html, source=query.source, timestamp=timestamp)


def convert_html_to_vast(
    html: str,
    *,
    source: str,
    timestamp: datetime | None = None,
) -> VastFile:
    """Parse a page, rebuild its comment tree and wrap it as a VAST document."""
    soup = parse_html(html)
    records = extract_comments(soup)
    root = nest_comments(records)

    logger.info(
        "Converted %s: %d comments, %d threads, depth %d",
        source,
        count_comments(root.children),
        len(root.children),
        max_depth(root.children),
    )

    return format_vast_file(
        make_topic_node(root, source=source),
        source=source,
        timestamp=timestamp,
    )
