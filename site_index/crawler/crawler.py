# === FILE: site_index/crawler/crawler.py ===
"""Depth-first site traversal building a :class:`SiteScan`.

A :class:`SiteCrawler` owns the state of exactly one scan: the graph under
construction and the set of URIs already proven not to be pages. Pages are
fetched one at a time (each ``await`` completes before the next request is
issued), so the check-then-register sequence in :meth:`SiteCrawler._enter_page`
cannot race with another fetch of the same URI.

The traversal keeps its own stack of :class:`_Frame` objects instead of
recursing, so the length of a chain of pages is bounded by memory only.
"""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set, Tuple

from aiohttp import ClientError

from site_index.config import ScannerConfig
from site_index.crawler.fetcher import Fetcher, HttpStatusError, UnsupportedMimeTypeError
from site_index.crawler.link_extractor import extract_references, resolve
from site_index.crawler.models import PageScan, SiteScan
from site_index.parser.html_parser import parse_html
from site_index.utils import URL_PATH_SEPARATOR, extract_domain

__all__ = ("SiteCrawler",)


@dataclass(slots=True)
class _Frame:
    """A scanned page whose in-site links are still being followed."""

    page: PageScan
    pending: Iterator[str]


class SiteCrawler:
    """Scans one site, starting at *homepage_url*."""

    def __init__(self, config: ScannerConfig, homepage_url: str, fetcher: Fetcher) -> None:
        self.config = config
        self.homepage_url = homepage_url
        self.fetcher = fetcher
        self.known_non_page_uris: Set[str] = set()
        self.site_scan = SiteScan(domain=extract_domain(homepage_url))
        self.logger = logging.getLogger("SiteIndex")

    async def scan(self) -> Optional[SiteScan]:
        """Run the scan. Returns ``None`` if a transport error aborted it."""
        self.site_scan.clear()
        self.known_non_page_uris.clear()
        self.logger.info("Scan commenced: %s", self.homepage_url)
        start = time.monotonic()
        try:
            self.site_scan.homepage = await self._scan_page(self.homepage_url)
        except (ClientError, asyncio.TimeoutError) as exc:
            self.logger.warning("Scan aborted, problem fetching pages: %r", exc)
            return None
        duration = time.monotonic() - start
        self.logger.info(
            "Scan completed: %s (%d pages, %d resources, %.2f s)",
            self.homepage_url,
            len(self.site_scan.pages),
            len(self.site_scan.resources),
            duration,
        )
        return self.site_scan

    async def _scan_page(self, url: str) -> Optional[PageScan]:
        """Scan *url* and every new site page reachable from it, depth first."""
        root, frame = await self._enter_page(url)
        stack: List[_Frame] = [frame] if frame is not None else []
        while stack:
            top = stack[-1]
            link = next(top.pending, None)
            if link is None:
                stack.pop()
                continue
            if not link.strip():
                continue
            # already-scanned pages are counted and returned by _enter_page itself
            link_scan, child = await self._enter_page(link)
            if link_scan is not None:
                top.page.add_link(link_scan)
            if child is not None:
                stack.append(child)
        return root

    async def _enter_page(self, url: str) -> Tuple[Optional[PageScan], Optional[_Frame]]:
        """
        Resolve *url* to a page without following its links.

        Returns ``(page, frame)``: ``frame`` is set only for a newly scanned
        page and carries the in-site links still to visit; ``page`` is
        ``None`` when the URI is not a page.
        """
        # a URI that did not respond with a page once will not do so now
        if url in self.known_non_page_uris:
            self.logger.debug("Cannot retrieve page '%s'. Uri known not to contain HTML page.", url)
            return None, None

        existing = self.site_scan.get_page(url)
        if existing is not None:
            existing.inc_references()
            return existing, None

        try:
            page = await self.fetcher.fetch(url)
        except HttpStatusError as exc:
            self.logger.debug("Could not retrieve page '%s'. Status Code: %s", url, exc.status)
            self.known_non_page_uris.add(url)
            return None, None
        except UnsupportedMimeTypeError as exc:
            self.logger.debug("Could not retrieve page '%s'. Mime type: %s", url, exc.mime_type)
            self.known_non_page_uris.add(url)
            return None, None

        # registered before its links are followed, so links back to this page find it
        page_scan = PageScan(url)
        self.site_scan.register_page(page_scan)
        self.logger.info("Scanning page: %s", url)

        domain = self.site_scan.domain
        base = url[: url.rfind(URL_PATH_SEPARATOR) + 1]
        parsed = parse_html(page)
        self.logger.debug("base: %s, title: %s", base, parsed.title)

        self_ref = resolve(url, "", domain)
        links_to_scan: List[str] = []
        for tag, attr_name, value in extract_references(parsed, self.config.link_templates):
            ref = resolve(base, value, domain)
            self.logger.debug(
                "%s.%s: %s %s", tag, attr_name, ref.site_reference_description(), ref.absolute_ref
            )
            if not ref.site_reference:
                page_scan.external_links.add(ref.absolute_ref)
            elif ref != self_ref:
                links_to_scan.append(ref.absolute_ref)

        for tag, attr_name, value in extract_references(parsed, self.config.resource_templates):
            ref = resolve(base, value, domain)
            self.logger.debug(
                "%s.%s: %s %s", tag, attr_name, ref.site_reference_description(), ref.absolute_ref
            )
            resource = self.site_scan.get_or_create_resource(ref.absolute_ref)
            page_scan.add_resource(resource)
            resource.inc_references()

        return page_scan, _Frame(page_scan, iter(links_to_scan))
