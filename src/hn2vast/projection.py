"""Project reconstructed comment trees onto VAST nodes."""

from __future__ import annotations

from hn2vast.schemas import CommentNode, CommentRecord, VastNode

_CONTENT_NAME = "text"
_PARAGRAPH_NAME = "p"


def make_topic_node(root: CommentNode, *, source: str) -> VastNode:
    """Project the synthetic root as the ``topic`` node of a document.

    Only the root's children are emitted; the root has no content node.
    """
    return VastNode(
        reference=source,
        kind="topic",
        children=[make_comment_node(child, source=source) for child in root.children],
    )


def make_comment_node(node: CommentNode, *, source: str) -> VastNode:
    """Project a comment and its replies, depth-first.

    Nodes are built post-order from an explicit stack: when a comment is
    finished, its projected replies are the last entries of ``built``.
    """
    if node.record is None:
        raise ValueError("The synthetic root has no comment node; use make_topic_node")

    built: list[VastNode] = []
    stack: list[tuple[CommentNode, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if not expanded:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(current.children))
            continue

        start = len(built) - len(current.children)
        replies = built[start:]
        del built[start:]
        built.append(_make_comment(current.record, replies, source=source))

    return built[0]


def _make_comment(
    record: CommentRecord, replies: list[VastNode], *, source: str
) -> VastNode:
    return VastNode(
        reference=f"{source}#{record.id}",
        name=record.id,
        kind="comment",
        children=[_make_content_node(record.text), *replies],
    )


def _make_content_node(fragments: tuple[str, ...]) -> VastNode:
    return VastNode(
        name=_CONTENT_NAME,
        kind="content",
        children=[
            VastNode(name=_PARAGRAPH_NAME, kind="paragraph", size=len(fragment))
            for fragment in fragments
        ],
    )
