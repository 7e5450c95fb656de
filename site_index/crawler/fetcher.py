# site_index/crawler/fetcher.py
"""
Fetcher module: retrieves a single HTML page over HTTP, following redirects.

Outcomes
--------
* :class:`~site_index.crawler.models.PageData` – the page was fetched and is
  a text/XML document.
* :class:`HttpStatusError` / :class:`UnsupportedMimeTypeError` – the URI
  answered but is not a usable page. Both derive from :class:`NonPageError`
  and the crawler treats them as soft failures.
* ``aiohttp.ClientError`` / ``asyncio.TimeoutError`` – transport failure,
  propagated unchanged to the caller.

There is no retry of any kind.
"""
from __future__ import annotations

import re

from aiohttp import ClientSession

from site_index.config import ScannerConfig
from site_index.crawler.models import PageData

__all__ = ("Fetcher", "NonPageError", "HttpStatusError", "UnsupportedMimeTypeError")

_XML_MIME_RE = re.compile(r"(application|text)/(xml|[\w.+-]+\+xml)")


class NonPageError(Exception):
    """The URI responded, but not with an HTML page."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class HttpStatusError(NonPageError):
    def __init__(self, url: str, status: int) -> None:
        super().__init__(url, f"HTTP status {status} fetching {url}")
        self.status = status


class UnsupportedMimeTypeError(NonPageError):
    def __init__(self, url: str, mime_type: str) -> None:
        super().__init__(url, f"Unsupported mime type {mime_type!r} fetching {url}")
        self.mime_type = mime_type


def is_supported_mime(mime: str) -> bool:
    """Text and XML documents are parseable; an absent Content-Type is given the benefit of the doubt."""
    return not mime or mime.startswith("text/") or _XML_MIME_RE.fullmatch(mime) is not None


class Fetcher:
    """Fetches pages through a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, session: ClientSession, config: ScannerConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its decoded text.

        Raises NonPageError subclasses for non-2xx answers and non-text
        payloads; transport errors are not caught here.
        """
        async with self.session.get(
            url,
            allow_redirects=True,
            max_redirects=self.config.max_redirects,
            raise_for_status=False,
        ) as resp:
            if not 200 <= resp.status < 300:
                raise HttpStatusError(url, resp.status)
            mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
            if not is_supported_mime(mime):
                raise UnsupportedMimeTypeError(url, mime)
            text = await resp.text(errors="replace")
            return PageData(url, text)
