# === FILE: site_index/config.py ===
"""
Модуль для загрузки и валидации конфигурации сканера SiteIndex.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from site_index.utils import extract_domain

__all__ = ["ScannerConfig", "TagTemplate", "load_config", "parse_templates"]

#: пара (имя тега, имя атрибута), например ``("a", "href")``
TagTemplate = Tuple[str, str]

_BARE_HOST_RE = re.compile(r"https?://[^/#?]+")


def parse_templates(value: str) -> Tuple[TagTemplate, ...]:
    """Разбирает строку вида ``"img.src,script.src"`` в кортеж пар (тег, атрибут)."""
    templates = []
    for item in value.split(","):
        tag, sep, attr = item.strip().partition(".")
        if not sep or not tag or not attr or "." in attr:
            raise ValueError(f"Шаблон должен иметь вид 'tag.attribute', получено {item!r}")
        templates.append((tag, attr))
    return tuple(templates)


class ScannerConfig(BaseModel):
    """Конфигурация для одного запуска сканирования."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    homepage_url: Optional[str] = Field(None, description="Страница, с которой начинается обход.")
    output_file: Optional[str] = Field(None, description="Файл для HTML-отчёта.")
    links: str = Field("a.href", description="Пары tag.attribute со ссылками на страницы.")
    resources: str = Field(
        "img.src,script.src,link.href",
        description="Пары tag.attribute со ссылками на встроенные ресурсы.",
    )
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("SiteIndexBot/1.0", min_length=1, description="Заголовок User-Agent.")
    max_redirects: int = Field(10, ge=0, description="Максимум переходов по редиректам.")

    @field_validator("homepage_url")
    def _check_homepage(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        # "http://host" -> "http://host/", иначе домен сайта не определить
        if _BARE_HOST_RE.fullmatch(v):
            v += "/"
        if not extract_domain(v):
            raise ValueError(f"Ожидается абсолютный http(s) URL с путём, получено {v!r}")
        return v

    @field_validator("links", "resources")
    def _check_templates(cls, v: str) -> str:
        parse_templates(v)
        return v

    @property
    def link_templates(self) -> Tuple[TagTemplate, ...]:
        return parse_templates(self.links)

    @property
    def resource_templates(self) -> Tuple[TagTemplate, ...]:
        return parse_templates(self.resources)


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ScannerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScannerConfig.
    Без пути берёт configs/default.yaml, а если его нет, значения по умолчанию.
    При отсутствии явно указанного файла бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScannerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    try:
        return ScannerConfig(**data)
    except ValidationError:
        raise
