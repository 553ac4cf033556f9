"""Tests for thread input parsing."""

from __future__ import annotations

import pytest

from hn2vast.query_parser import parse_thread_input


@pytest.mark.parametrize(
    ("input_text", "item_id"),
    [
        ("hn:8863", "8863"),
        ("https://news.ycombinator.com/item?id=8863", "8863"),
        ("http://news.ycombinator.com/item?id=8863", "8863"),
        ("https://news.ycombinator.com/item?id=8863&p=2", "8863"),
        ("https://NEWS.ycombinator.com/item/?id=8863", "8863"),
    ],
)
def test_parse_remote_inputs(input_text: str, item_id: str) -> None:
    query = parse_thread_input(input_text)

    assert query.is_remote
    assert query.item_id == item_id
    assert query.source == f"https://news.ycombinator.com/item?id={item_id}"
    assert query.input_text == input_text


def test_local_path() -> None:
    """Anything that is not a URL or shorthand is a file path."""
    query = parse_thread_input("saved/thread.html")

    assert not query.is_remote
    assert query.item_id is None
    assert query.source == "saved/thread.html"


def test_rejects_empty_input() -> None:
    with pytest.raises(ValueError, match="empty"):
        parse_thread_input("   ")


@pytest.mark.parametrize("input_text", ["hn:", "hn:abc", "hn:12a"])
def test_rejects_bad_shorthand(input_text: str) -> None:
    with pytest.raises(ValueError, match="Invalid item id"):
        parse_thread_input(input_text)


def test_rejects_unknown_host() -> None:
    with pytest.raises(ValueError, match="Unsupported host"):
        parse_thread_input("https://example.com/item?id=8863")


def test_rejects_subdomain_of_evil_host() -> None:
    """Reject URLs where the forum host is a subdomain of an attacker host."""
    with pytest.raises(ValueError, match="Unsupported host"):
        parse_thread_input("https://news.ycombinator.com.evil.com/item?id=8863")


def test_rejects_url_with_credentials() -> None:
    """Reject URLs carrying credentials."""
    with pytest.raises(ValueError, match="URLs with credentials are not allowed"):
        parse_thread_input("https://news.ycombinator.com@evil.com/item?id=8863")


def test_rejects_non_item_path() -> None:
    with pytest.raises(ValueError, match="Not an item URL"):
        parse_thread_input("https://news.ycombinator.com/news")


def test_rejects_missing_id() -> None:
    with pytest.raises(ValueError, match="Invalid item id"):
        parse_thread_input("https://news.ycombinator.com/item")
