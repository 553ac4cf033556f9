"""Comment record and tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Indent of the synthetic root; lower than any extracted indent.
ROOT_INDENT = -1


class CommentRecord(BaseModel):
    """A single comment as extracted from the page, before nesting."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    text: tuple[str, ...] = ()
    indent: int = Field(..., ge=0)


class CommentNode(BaseModel):
    """A comment together with its replies.

    The root of a reconstructed tree carries no record; its indent is
    ``ROOT_INDENT``.
    """

    record: CommentRecord | None = None
    children: list["CommentNode"] = Field(default_factory=list)

    @property
    def indent(self) -> int:
        if self.record is None:
            return ROOT_INDENT
        return self.record.indent

    @property
    def is_root(self) -> bool:
        return self.record is None
