"""Query model for thread ingestion."""

from __future__ import annotations

from pydantic import BaseModel


class ThreadQuery(BaseModel):
    """Resolved input for a single conversion.

    Attributes:
        input_text: The original input text provided by the user.
        source: Item URL for remote threads, the file path otherwise. Used as
            the ``source`` of the VAST document and as the base of node refs.
        item_id: Numeric item identifier for remote threads.
        is_remote: True when the page has to be downloaded.
    """

    input_text: str
    source: str
    item_id: str | None = None
    is_remote: bool = False
