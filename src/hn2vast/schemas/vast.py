"""VAST document models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hn2vast.config import VAST_COLORS, VAST_FORMAT, VAST_VERSION

NodeKind = Literal["paragraph", "content", "comment", "topic"]


class VastNode(BaseModel):
    """A node of the generic labeled tree.

    ``reference`` and ``kind`` are written as ``ref`` and ``type``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    reference: str | None = Field(default=None, alias="ref")
    name: str | None = None
    kind: NodeKind = Field(..., alias="type")
    size: int | None = Field(default=None, ge=0)
    children: list["VastNode"] | None = None


class VastFile(BaseModel):
    """Top-level VAST document."""

    format: Literal["vast"] = VAST_FORMAT
    version: str = VAST_VERSION
    source: str
    colors: dict[str, str] = Field(default_factory=lambda: dict(VAST_COLORS))
    timestamp: str
    vast: VastNode
