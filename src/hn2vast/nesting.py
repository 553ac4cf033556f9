"""Rebuild comment threads from indentation alone."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from hn2vast.exceptions import ReconstructionError
from hn2vast.schemas import CommentNode, CommentRecord

logger = logging.getLogger(__name__)


def nest_comments(records: Sequence[CommentRecord]) -> CommentNode:
    """Nest records under a synthetic root using their indent values.

    A record becomes a child of the nearest preceding open comment with a
    strictly smaller indent. Equal or larger indent on the open comment closes
    it and the same record is tried again against the next one up the chain,
    so equal-indent records end up as siblings.

    Raises:
        ReconstructionError: If a record cannot be placed even under the root,
            which only happens for indents at or below ``ROOT_INDENT``.
    """
    root = CommentNode()
    chain: list[CommentNode] = [root]

    index = 0
    while index < len(records):
        record = records[index]
        parent = chain[-1]

        if record.indent > parent.indent:
            node = CommentNode(record=record)
            parent.children.append(node)
            chain.append(node)
            index += 1
            continue

        if parent.is_root:
            raise ReconstructionError(
                f"Comment {record.id!r} with indent {record.indent} "
                f"cannot be placed below the root"
            )
        chain.pop()

    logger.debug(
        "Nested %d comments into %d threads", len(records), len(root.children)
    )
    return root


def iter_comments(nodes: Iterable[CommentNode]) -> Iterator[CommentNode]:
    """Yield comment nodes in pre-order."""
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_comments(nodes: Iterable[CommentNode]) -> int:
    """Count total comments in the tree."""
    return sum(1 for _ in iter_comments(nodes))


def max_depth(nodes: Iterable[CommentNode]) -> int:
    """Depth of the deepest comment; top-level comments have depth 1."""
    deepest = 0
    stack = [(node, 1) for node in nodes]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in node.children)
    return deepest
