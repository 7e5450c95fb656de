# === FILE: site_index/scanner.py ===
"""
Точка запуска сканирования сайта.

SiteScanner хранит только конфигурацию; каждое обращение к ``scan()``
создаёт собственную HTTP-сессию и новый SiteCrawler, поэтому состояние
разных сканирований никогда не смешивается.
"""
from __future__ import annotations

from typing import Optional

from aiohttp import ClientSession, ClientTimeout

from site_index.config import ScannerConfig
from site_index.crawler.crawler import SiteCrawler
from site_index.crawler.fetcher import Fetcher
from site_index.crawler.models import SiteScan

__all__ = ["SiteScanner", "start_scan"]


class SiteScanner:
    """Запускает сканирование сайта с заданной конфигурацией."""

    def __init__(self, config: ScannerConfig) -> None:
        self.config = config

    async def scan(self, homepage_url: str) -> Optional[SiteScan]:
        """
        Сканирует сайт, начиная с homepage_url.

        Returns
        -------
        Optional[SiteScan]
            Модель сайта или None, если сканирование прервано сетевой ошибкой.
        """
        timeout = ClientTimeout(total=self.config.timeout)
        async with ClientSession(
            timeout=timeout,
            headers={"User-Agent": self.config.user_agent},
        ) as session:
            crawler = SiteCrawler(self.config, homepage_url, Fetcher(session, self.config))
            return await crawler.scan()


async def start_scan(cfg: ScannerConfig, homepage_url: Optional[str] = None) -> Optional[SiteScan]:
    """
    Запускает сканирование по конфигу.

    homepage_url перекрывает значение из конфигурации.
    """
    url = homepage_url or cfg.homepage_url
    if not url:
        raise ValueError("Не задан URL стартовой страницы (homepage_url)")
    return await SiteScanner(cfg).scan(url)
