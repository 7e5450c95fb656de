# File: site_index/utils.py
"""site_index.utils: Утилитарные функции для склейки URL, определения домена сайта и обработки текста отчёта."""

from __future__ import annotations

import re
from typing import Optional, Sequence

__all__: Sequence[str] = (
    "URL_PATH_SEPARATOR",
    "join_url",
    "extract_domain",
    "strip_fragment",
    "remove_blank_lines",
)

URL_PATH_SEPARATOR = "/"
_FRAGMENT_START = "#"
_DOMAIN_RE = re.compile(r"(https?://.*?/).*")
_LINE_BREAK_RE = re.compile(r"[\r\n]")


def join_url(base: str, ref: str) -> str:
    """Склеивает две части URL ровно через один разделитель пути."""
    plain_base = base.rstrip(URL_PATH_SEPARATOR)
    plain_ref = ref.strip(URL_PATH_SEPARATOR)
    return f"{plain_base}{URL_PATH_SEPARATOR}{plain_ref}"


def extract_domain(url: Optional[str]) -> str:
    """Возвращает префикс сайта вида ``http://host/`` или пустую строку, если URL не абсолютный."""
    if url is None:
        return ""
    match = _DOMAIN_RE.fullmatch(url)
    return match.group(1) if match else ""


def strip_fragment(url: str) -> str:
    """Убирает якорь (``#...``) из URL."""
    return url.split(_FRAGMENT_START, 1)[0]


def remove_blank_lines(text: str) -> str:
    """Удаляет пустые строки; результат всегда с POSIX-переводами строк."""
    return "\n".join(line for line in _LINE_BREAK_RE.split(text) if line.strip())
