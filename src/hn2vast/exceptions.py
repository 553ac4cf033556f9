"""Custom exceptions for hn2vast."""


class Hn2vastError(Exception):
    """Base exception for hn2vast operations."""


class FetchError(Hn2vastError):
    """Error during content fetching."""


class ItemNotFoundError(FetchError):
    """The requested item page does not exist."""


class ParseError(Hn2vastError):
    """Error during markup parsing."""


class MalformedCommentError(ParseError):
    """A comment container is missing its text, indent marker, or width."""

    def __init__(self, comment_id: str, reason: str) -> None:
        self.comment_id = comment_id
        self.reason = reason
        super().__init__(f"Malformed comment {comment_id!r}: {reason}")


class ReconstructionError(Hn2vastError):
    """The comment chain was unwound past the synthetic root."""
