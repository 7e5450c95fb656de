# File: tests/test_engine.py
import json

import pytest

import site_index.engine as engine_module
from site_index.config import ScannerConfig
from site_index.crawler.models import PageScan, SiteScan
from site_index.engine import Engine, ScanFailedError


def make_site() -> SiteScan:
    site = SiteScan(domain="http://example.com/")
    home = PageScan("http://example.com/index.html")
    site.register_page(home)
    site.homepage = home
    return site


@pytest.fixture()
def fake_scan(monkeypatch):
    calls = []

    async def _fake(cfg, homepage_url=None):
        calls.append(homepage_url)
        return make_site()

    monkeypatch.setattr(engine_module, "start_scan", _fake)
    return calls


def test_run_scanner_writes_report(fake_scan, tmp_path):
    out = tmp_path / "siteindex.html"
    text = Engine(ScannerConfig()).run_scanner("http://example.com/index.html", output_file=out)

    assert fake_scan == ["http://example.com/index.html"]
    assert out.read_text(encoding="utf-8") == text
    assert all(line.strip() for line in text.split("\n"))
    assert "http://example.com/index.html" in text


def test_run_scanner_without_output(fake_scan, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    text = Engine(ScannerConfig()).run_scanner("http://example.com/index.html")
    assert text.startswith("<!DOCTYPE html>")
    assert list(tmp_path.iterdir()) == []


def test_run_scanner_json(fake_scan, tmp_path):
    Engine(ScannerConfig()).run_scanner(
        "http://example.com/index.html", json_file=tmp_path / "report.json"
    )
    data = json.loads((tmp_path / "report.json").read_text(encoding="utf-8"))
    assert data["homepage"] == "http://example.com/index.html"


def test_failed_scan_raises(monkeypatch):
    async def _failed(cfg, homepage_url=None):
        return None

    monkeypatch.setattr(engine_module, "start_scan", _failed)
    with pytest.raises(ScanFailedError):
        Engine(ScannerConfig()).run_scanner("http://example.com/index.html")


def test_engine_has_no_config_loader():
    # configuration is loaded by the CLI through site_index.config
    assert not hasattr(Engine, "load_config")
