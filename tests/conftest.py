"""Test setup for hn2vast."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


def comment_row(comment_id: str, width: int | str, body: str) -> str:
    """Markup of one comment row as it appears on an item page."""
    return (
        f'<tr class="athing comtr" id="{comment_id}"><td><table><tr>'
        f'<td class="ind" indent="0"><img src="s.gif" height="1" width="{width}"></td>'
        f'<td class="default"><div class="comment">'
        f'<div class="commtext c00">{body}</div>'
        f"</div></td></tr></table></td></tr>"
    )


def item_page(*rows: str) -> str:
    """Wrap comment rows into a minimal item page."""
    return (
        "<html><head><title>Thread</title></head><body>"
        '<table class="fatitem"><tr class="athing submission" id="100"><td>Story</td></tr></table>'
        f'<table class="comment-tree">{"".join(rows)}</table>'
        "</body></html>"
    )


@pytest.fixture
def make_row() -> Callable[[str, int | str, str], str]:
    """Builder for a single comment row."""
    return comment_row


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Builder for an item page from comment rows."""
    return item_page


@pytest.fixture
def thread_html() -> str:
    """Item page with two threads: 101 -> (102 -> 103), 104; then 105."""
    return item_page(
        comment_row("101", 0, "First paragraph<p>Second paragraph</p>"),
        comment_row("102", 40, "Reply to first"),
        comment_row("103", 80, "Deep reply"),
        comment_row("104", 40, "Another reply"),
        comment_row("105", 0, "Second thread"),
    )


@pytest.fixture
def network_timeout() -> float:
    """Default timeout for network operations in seconds."""
    return 60.0
