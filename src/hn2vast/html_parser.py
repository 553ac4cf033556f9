"""Extract flat comment records from a Hacker News item page."""

from __future__ import annotations

import logging

from hn2vast.config import (
    COMMENT_SELECTOR,
    COMMENT_TEXT_SELECTOR,
    INDENT_SELECTOR,
    SPACER_SELECTOR,
)
from hn2vast.exceptions import MalformedCommentError, ParseError
from hn2vast.html_utils import find_elements, find_first, first_text, is_text
from hn2vast.schemas import CommentRecord

try:
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def extract_comments(root: Tag) -> list[CommentRecord]:
    """Extract one record per comment container, in document order.

    Raises:
        MalformedCommentError: If any container lacks its text element,
            indent marker or a usable spacer width. Nothing is returned for
            the other containers in that case.
    """
    containers = find_elements(root, COMMENT_SELECTOR)
    records = [parse_comment(container) for container in containers]
    logger.debug("Extracted %d comment records", len(records))
    return records


def parse_comment(container: Tag) -> CommentRecord:
    """Build a record from a single comment container."""
    comment_id = container.get("id") or ""

    text_node = find_first(container, COMMENT_TEXT_SELECTOR)
    if text_node is None:
        raise MalformedCommentError(comment_id, "no comment text element")

    return CommentRecord(
        id=comment_id,
        text=tuple(_extract_fragments(text_node)),
        indent=_extract_indent(container, comment_id),
    )


def _extract_indent(container: Tag, comment_id: str) -> int:
    indent_node = find_first(container, INDENT_SELECTOR)
    if indent_node is None:
        raise MalformedCommentError(comment_id, "no indent marker")

    spacer = find_first(indent_node, SPACER_SELECTOR)
    if spacer is None:
        raise MalformedCommentError(comment_id, "no spacer image in indent marker")

    width = spacer.get("width")
    if width is None:
        raise MalformedCommentError(comment_id, "spacer image has no width")
    # Integral decimals such as "40.0" are accepted; "40.5" is not.
    try:
        number = float(str(width).strip())
    except ValueError as exc:
        raise MalformedCommentError(
            comment_id, f"non-numeric spacer width {width!r}"
        ) from exc
    if not number.is_integer():
        raise MalformedCommentError(
            comment_id, f"non-integer spacer width {width!r}"
        )
    indent = int(number)
    if indent < 0:
        raise MalformedCommentError(comment_id, f"negative spacer width {indent}")
    return indent


def _extract_fragments(text_node: Tag) -> list[str]:
    """Collect paragraph fragments from the immediate children of ``text_node``.

    Bare text children are taken as-is; ``<p>`` children contribute the text
    of their first descendant. Whitespace-only fragments are dropped.
    """
    fragments: list[str] = []
    for child in text_node.children:
        if is_text(child):
            text = str(child)
        elif isinstance(child, Tag) and child.name == "p":
            text = first_text(child) or ""
        else:
            continue
        if text.strip():
            fragments.append(text)
    return fragments
