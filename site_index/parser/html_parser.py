# === FILE: site_index/parser/html_parser.py ===
"""HTML parsing utilities for SiteIndex.

The crawler only needs two primitives from a parsed document: select all
elements with a given tag name in document order, and read an attribute of an
element (``""`` when it is absent). :class:`ParsedPage` wraps a
BeautifulSoup tree and exposes exactly that, plus the page title which the
crawler logs.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, List

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("ParsedPage", "parse_html", "attr")


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    url: str
    title: str
    soup: BeautifulSoup

    def select(self, tag_name: str) -> List[Tag]:
        """Return every element named *tag_name*, in document order."""
        return [el for el in self.soup.find_all(tag_name) if isinstance(el, Tag)]


def attr(element: Tag, name: str) -> str:
    """Attribute value of *element*, or ``""`` if it has no such attribute."""
    value = element.get(name)
    if value is None:
        return ""
    # multi-valued attributes (class, rel) come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def parse_html(page: Any) -> ParsedPage:
    """Parse raw HTML (string) or :class:`~site_index.crawler.models.PageData`.

    Parameters
    ----------
    page
        Either a *str* (HTML markup) **or** a ``PageData`` object with
        ``url`` and ``content`` attributes.
    """
    if hasattr(page, "content") and hasattr(page, "url"):
        html = page.content
        base_url = str(page.url)
    else:
        html = str(page)
        base_url = ""

    soup = BeautifulSoup(html, "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    return ParsedPage(url=base_url, title=title, soup=soup)
