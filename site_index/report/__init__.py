# File: site_index/report/__init__.py
"""site_index.report: Генерация отчётов (HTML и JSON), используемая Engine и CLI."""

from site_index.report.html_report import DEFAULT_TEMPLATE_DIR, render_html
from site_index.report.json_report import render_json

__all__ = ["DEFAULT_TEMPLATE_DIR", "render_html", "render_json"]
