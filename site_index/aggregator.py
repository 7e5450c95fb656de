# File: site_index/aggregator.py
"""site_index.aggregator: Преобразование модели SiteScan в сериализуемый отчёт."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import List, Optional, TypedDict

from site_index.crawler.models import PageScan, SiteScan


class PageInfo(TypedDict):
    """Информация о странице сайта."""

    uri: str
    references: int
    links: List[str]
    external_links: List[str]
    resources: List[str]


class ResourceInfo(TypedDict):
    """Информация о встроенном ресурсе (картинка, скрипт, стиль)."""

    uri: str
    references: int


@dataclass(slots=True)
class ScanReport:
    """Результаты сканирования сайта: страницы и ресурсы, отсортированные по URI."""

    domain: str = ""
    homepage: Optional[str] = None
    pages: List[PageInfo] = field(default_factory=list)
    resources: List[ResourceInfo] = field(default_factory=list)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление ScanReport."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def _page_info(page: PageScan) -> PageInfo:
    return {
        "uri": page.uri,
        "references": page.references,
        "links": [p.uri for p in page.sorted_links()],
        "external_links": page.sorted_external_links(),
        "resources": [r.uri for r in page.sorted_resources()],
    }


def aggregate_results(site_scan: SiteScan) -> ScanReport:
    """Собирает все части отчёта в ScanReport."""
    return ScanReport(
        domain=site_scan.domain,
        homepage=site_scan.homepage.uri if site_scan.homepage else None,
        pages=[_page_info(p) for p in site_scan.sorted_pages()],
        resources=[
            {"uri": r.uri, "references": r.references} for r in site_scan.sorted_resources()
        ],
    )
