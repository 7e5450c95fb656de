# File: site_index/report/html_report.py
"""site_index.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from site_index.aggregator import ScanReport

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    report: ScanReport,
    template_dir: Union[Path, str, None] = None,
    output_path: Union[Path, str, None] = None,
) -> str:
    """Рендерит HTML-отчёт из шаблона и, если указан путь, сохраняет его.

    Args:
        report: объект ScanReport.
        template_dir: директория с шаблоном ``report.html.j2``
            (по умолчанию шаблон из пакета).
        output_path: путь к итоговому HTML-файлу или None.

    Returns:
        Текст отчёта.

    Пример:
    ```python
    from site_index.report.html_report import render_html
    html = render_html(report, output_path='reports/siteindex.html')
    ```
    """
    env = Environment(
        loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "domain": report.domain,
        "homepage": report.homepage,
        "pages": report.pages,
        "resources": report.resources,
    }
    html_content = template.render(**context)

    if output_path is not None:
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html_content, encoding="utf-8")

    return html_content
