# File: site_index/engine.py
"""site_index.engine: сканирование сайта и запись HTML-отчёта в файл."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

from site_index.aggregator import ScanReport, aggregate_results
from site_index.config import ScannerConfig
from site_index.crawler.models import SiteScan
from site_index.logger import logger
from site_index.report.html_report import render_html
from site_index.report.json_report import render_json
from site_index.scanner import start_scan
from site_index.utils import remove_blank_lines

__all__ = ["Engine", "ScanFailedError"]


class ScanFailedError(RuntimeError):
    """Сканирование не дало результата (сетевая ошибка при обходе)."""


class Engine:
    """Фасад для CLI и тестов: запуск сканирования и генерация отчёта."""

    def __init__(self, config: ScannerConfig) -> None:
        self.config = config

    def scan(self, homepage_url: str) -> SiteScan:
        """Сканирует сайт; бросает ScanFailedError, если обход был прерван."""
        site_scan = asyncio.run(start_scan(self.config, homepage_url))
        if site_scan is None:
            raise ScanFailedError(f"Scan of {homepage_url} failed, no site index produced")
        return site_scan

    def run_scanner(
        self,
        homepage_url: str,
        output_file: Union[str, Path, None] = None,
        template_dir: Union[str, Path, None] = None,
        json_file: Union[str, Path, None] = None,
    ) -> str:
        """Сканирует сайт, рендерит HTML-отчёт без пустых строк и при необходимости сохраняет его.

        Если указан json_file, рядом сохраняется и JSON-представление отчёта.
        """
        report = self.aggregate_results(self.scan(homepage_url))
        if json_file is not None:
            logger.info("JSON report written to: %s", render_json(report, json_file))
        text = remove_blank_lines(render_html(report, template_dir))
        if output_file is not None:
            output = Path(output_file)
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text, encoding="utf-8")
            logger.info("Site index written to: %s", output)
        return text

    @staticmethod
    def aggregate_results(site_scan: SiteScan) -> ScanReport:
        """Преобразует SiteScan в ScanReport через site_index.aggregator."""
        return aggregate_results(site_scan)
