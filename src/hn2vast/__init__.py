"""hn2vast: convert Hacker News comment threads into VAST documents."""

from hn2vast.exceptions import (
    FetchError,
    Hn2vastError,
    ItemNotFoundError,
    MalformedCommentError,
    ParseError,
    ReconstructionError,
)
from hn2vast.ingestion import IngestionOptions, convert_html_to_vast, ingest_thread
from hn2vast.nesting import nest_comments
from hn2vast.query_parser import parse_thread_input
from hn2vast.schemas import CommentNode, CommentRecord, ThreadQuery, VastFile, VastNode

__all__ = [
    "CommentNode",
    "CommentRecord",
    "FetchError",
    "Hn2vastError",
    "IngestionOptions",
    "ItemNotFoundError",
    "MalformedCommentError",
    "ParseError",
    "ReconstructionError",
    "ThreadQuery",
    "VastFile",
    "VastNode",
    "convert_html_to_vast",
    "ingest_thread",
    "nest_comments",
    "parse_thread_input",
]
