"""Shared markup utilities: selector matching and depth-first lookup."""

from __future__ import annotations

from typing import Iterable

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML document into a BeautifulSoup tree."""
    return BeautifulSoup(html, "lxml")


def matches_selector(tag: Tag, selector: str) -> bool:
    """Check a tag against a ``tag.class1.class2`` selector.

    The tag name is optional (``.comtr`` matches any element with that
    class). Every listed class must be present; order does not matter.
    """
    tag_name, *classes = selector.split(".")
    if tag_name and tag.name != tag_name:
        return False
    present = set(_class_list(tag))
    return all(cls in present for cls in classes if cls)


def find_elements(roots: Tag | Iterable[Tag], selector: str) -> list[Tag]:
    """Return every tag matching ``selector``, depth-first and pre-order.

    Unlike ``Tag.find_all`` the roots themselves are candidates too.
    """
    if isinstance(roots, Tag):
        roots = [roots]

    found: list[Tag] = []
    for root in roots:
        if not isinstance(root, BeautifulSoup) and matches_selector(root, selector):
            found.append(root)
        found.extend(
            root.find_all(lambda tag: matches_selector(tag, selector))
        )
    return found


def find_first(roots: Tag | Iterable[Tag], selector: str) -> Tag | None:
    """Return the first tag matching ``selector`` in document order."""
    if isinstance(roots, Tag):
        roots = [roots]

    for root in roots:
        if not isinstance(root, BeautifulSoup) and matches_selector(root, selector):
            return root
        match = root.find(lambda tag: matches_selector(tag, selector))
        if match is not None:
            return match
    return None


def is_text(node: PageElement | None) -> bool:
    """True for character data, False for markup comments, CDATA and the like."""
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def first_text(node: PageElement | None) -> str | None:
    """Follow first children down from ``node`` until a text node is found."""
    while node is not None:
        if is_text(node):
            return str(node)
        if not isinstance(node, Tag):
            return None
        node = next(iter(node.children), None)
    return None


def _class_list(tag: Tag) -> list[str]:
    classes = tag.get("class", [])
    if isinstance(classes, str):
        return classes.split()
    return list(classes)
