# site_index/crawler/models.py
"""
Data models for the SiteIndex crawler.

One :class:`SiteScan` is built per scan. Pages and resources are allocated
once into its indices and looked up by URI afterwards, which is what keeps
cyclic link structures finite.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass(slots=True)
class PageData:
    """Holds the requested URL and the decoded text of a fetched page."""

    url: str
    content: str


@dataclass(slots=True, eq=False)
class ResourceScan:
    """A non-page resource (image, script, stylesheet) referenced by pages of the site."""

    uri: str
    references: int = 0

    def inc_references(self) -> None:
        self.references += 1

    def __lt__(self, other: ResourceScan) -> bool:
        return self.uri < other.uri


@dataclass(slots=True, eq=False)
class PageScan:
    """Scan of a single page of the site.

    ``links`` and ``resources`` are keyed by URI so a target is recorded once
    however many times the page refers to it.
    """

    uri: str
    references: int = 0
    links: Dict[str, PageScan] = field(default_factory=dict)
    external_links: Set[str] = field(default_factory=set)
    resources: Dict[str, ResourceScan] = field(default_factory=dict)

    def inc_references(self) -> None:
        """Record one more reference to this page from the site being scanned."""
        self.references += 1

    def add_link(self, page: PageScan) -> None:
        self.links.setdefault(page.uri, page)

    def add_resource(self, resource: ResourceScan) -> None:
        self.resources.setdefault(resource.uri, resource)

    def sorted_links(self) -> List[PageScan]:
        return [self.links[uri] for uri in sorted(self.links)]

    def sorted_external_links(self) -> List[str]:
        return sorted(self.external_links)

    def sorted_resources(self) -> List[ResourceScan]:
        return [self.resources[uri] for uri in sorted(self.resources)]

    def __lt__(self, other: PageScan) -> bool:
        return self.uri < other.uri

    def __repr__(self) -> str:
        # links may be cyclic, keep the repr flat
        return (
            f"PageScan(uri={self.uri!r}, references={self.references}, "
            f"links={len(self.links)}, external_links={len(self.external_links)}, "
            f"resources={len(self.resources)})"
        )


@dataclass(slots=True)
class SiteScan:
    """Scan of a whole site from a given homepage."""

    domain: str = ""
    homepage: Optional[PageScan] = None
    pages: Dict[str, PageScan] = field(default_factory=dict)
    resources: Dict[str, ResourceScan] = field(default_factory=dict)

    def get_page(self, uri: str) -> Optional[PageScan]:
        return self.pages.get(uri)

    def register_page(self, page: PageScan) -> bool:
        """Insert *page* unless its URI is already indexed. First writer wins."""
        if page.uri in self.pages:
            return False
        self.pages[page.uri] = page
        return True

    def get_or_create_resource(self, uri: str) -> ResourceScan:
        """Return the indexed resource for *uri*, creating it with zero references if new."""
        resource = self.resources.get(uri)
        if resource is None:
            resource = ResourceScan(uri)
            self.resources[uri] = resource
        return resource

    def clear(self) -> None:
        """Drop all pages, resources and the homepage. The domain is kept."""
        self.homepage = None
        self.pages.clear()
        self.resources.clear()

    def sorted_pages(self) -> List[PageScan]:
        return [self.pages[uri] for uri in sorted(self.pages)]

    def sorted_resources(self) -> List[ResourceScan]:
        return [self.resources[uri] for uri in sorted(self.resources)]
