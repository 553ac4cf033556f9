"""Shared schemas for hn2vast."""

from hn2vast.schemas.comments import ROOT_INDENT, CommentNode, CommentRecord
from hn2vast.schemas.query import ThreadQuery
from hn2vast.schemas.vast import NodeKind, VastFile, VastNode

__all__ = [
    "ROOT_INDENT",
    "CommentNode",
    "CommentRecord",
    "NodeKind",
    "ThreadQuery",
    "VastFile",
    "VastNode",
]
