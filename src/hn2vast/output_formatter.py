"""Assemble and serialize VAST documents."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Iterator

from hn2vast.config import VAST_COLORS, VAST_FORMAT, VAST_VERSION
from hn2vast.schemas import VastFile, VastNode

_INDENT = "  "


def format_vast_file(
    root: VastNode,
    *,
    source: str,
    timestamp: datetime | None = None,
) -> VastFile:
    """Wrap a topic node into a VAST document envelope."""
    return VastFile(
        format=VAST_FORMAT,
        version=VAST_VERSION,
        source=source,
        colors=dict(VAST_COLORS),
        timestamp=format_timestamp(timestamp or datetime.now(timezone.utc)),
        vast=root,
    )


def format_timestamp(moment: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision, e.g. ``2024-01-02T03:04:05.678Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_json(document: VastFile) -> str:
    """Serialize a document with wire field names, omitting absent fields.

    The node tree is written from an explicit stack, so thread depth is not
    bounded by the interpreter's or pydantic-core's recursion limits.
    """
    envelope = document.model_dump(
        mode="json", by_alias=True, exclude_none=True, exclude={"vast"}
    )
    parts = ["{"]
    for key, value in envelope.items():
        parts.append(f"\n{_INDENT}{_dumps(key)}: {_dumps(value, level=1)},")
    parts.append(f'\n{_INDENT}"vast": ')
    parts.extend(_iter_node_json(document.vast, level=1))
    parts.append("\n}")
    return "".join(parts)


def _iter_node_json(root: VastNode, *, level: int) -> Iterator[str]:
    stack: list[tuple[VastNode | str, int]] = [(root, level)]
    while stack:
        item, depth = stack.pop()
        if isinstance(item, str):
            yield item
            continue

        pad = _INDENT * depth
        inner = pad + _INDENT
        fields = item.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude={"children"}
        )
        lines = [f"{inner}{_dumps(key)}: {_dumps(value)}" for key, value in fields.items()]

        if not item.children:
            if item.children is not None:
                lines.append(f'{inner}"children": []')
            yield "{\n" + ",\n".join(lines) + f"\n{pad}}}"
            continue

        lines.append(f'{inner}"children": [')
        yield "{\n" + ",\n".join(lines) + "\n"

        child_pad = inner + _INDENT
        pending: list[tuple[VastNode | str, int]] = []
        for index, child in enumerate(item.children):
            if index:
                pending.append((",\n", depth))
            pending.append((child_pad, depth))
            pending.append((child, depth + 2))
        pending.append((f"\n{inner}]\n{pad}}}", depth))
        stack.extend(reversed(pending))


def _dumps(value: object, *, level: int = 0) -> str:
    text = json.dumps(value, indent=2, ensure_ascii=False)
    return text.replace("\n", "\n" + _INDENT * level)
