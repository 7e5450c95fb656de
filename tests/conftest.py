# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Dict, List, Tuple

import pytest
import pytest_asyncio
from aiohttp import web

from site_index.config import ScannerConfig
from site_index.logger import configure

#: path -> (content type, body) of the static test site
Site = Dict[str, Tuple[str, str]]

_NAV = (
    '<ul class="nav">'
    '<li><a href="index.html">Home</a></li>'
    '<li><a href="homeware.html">Homeware</a></li>'
    '<li><a href="garden.html">Garden</a></li>'
    '<li><a href="tools.html">Tools</a></li>'
    '<li><a href="exercise.html">Exercise</a></li>'
    '<li><a href="about.html">About us</a></li>'
    "</ul>"
)

_HEAD = (
    '<link rel="stylesheet" href="css/style.css">'
    '<script src="js/site.js"></script>'
)


def _page(title: str, body: str, head: str = "") -> str:
    return (
        f"<html><head><title>{title}</title>{_HEAD}{head}</head>"
        f'<body><img src="images/logo.svg" alt="logo">{_NAV}{body}</body></html>'
    )


#: six pages sharing a navigation bar; 12 distinct resources in total
TESTSITE: Site = {
    "/index.html": (
        "text/html",
        _page(
            "Home",
            '<img src="images/banner.jpg"><p>Welcome to the shop.</p>',
            head='<link rel="stylesheet" href="css/print.css"><link rel="icon" href="favicon.ico">',
        ),
    ),
    "/homeware.html": (
        "text/html",
        _page(
            "Homeware",
            '<img src="images/homeware.jpg"><a href="catalogue.pdf">Catalogue</a>',
        ),
    ),
    "/garden.html": (
        "text/html",
        _page(
            "Garden",
            '<img src="images/garden.jpg"><p>See <a href="tools.html#hammers">hammers</a></p>'
            '<img src="images/garden.jpg">',
        ),
    ),
    "/tools.html": (
        "text/html",
        _page(
            "Tools",
            '<h2 id="hammers">Hammers</h2><img src="images/tools.jpg">'
            '<a href="discontinued.html">Old range</a>',
        ),
    ),
    "/exercise.html": (
        "text/html",
        _page(
            "Exercise",
            '<img src="/images/exercise.jpg"><a href="/discontinued.html">Old range</a>',
        ),
    ),
    "/about.html": (
        "text/html",
        _page(
            "About",
            '<img src="images/team.jpg">'
            '<a href="https://www.example.org/">Our partner</a>'
            '<script src="https://cdn.example.org/analytics.js"></script>',
        ),
    ),
    "/catalogue.pdf": ("application/pdf", "%PDF-1.4"),
}


def make_site_app(site: Site) -> web.Application:
    """Serve *site* from memory; unknown paths answer 404. Requested paths are recorded in app["requests"]."""
    app = web.Application()
    requests: List[str] = []
    app["requests"] = requests

    async def handle(request: web.Request) -> web.Response:
        requests.append(request.path)
        entry = site.get(request.path)
        if entry is None:
            return web.Response(status=404, text=f"Resource not found: {request.path}")
        content_type, body = entry
        return web.Response(body=body.encode("utf-8"), content_type=content_type)

    app.router.add_get("/{tail:.*}", handle)
    return app


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}/"
    finally:
        await runner.cleanup()


@pytest.fixture()
def scan_config() -> ScannerConfig:
    """Configuration used by crawler tests: short timeout, default templates."""
    return ScannerConfig(timeout=5.0, user_agent="TestAgent/1.0")


@pytest_asyncio.fixture
async def testsite(unused_tcp_port: int) -> AsyncIterator[Tuple[str, web.Application]]:
    """The six-page test site; yields ``(base_url, app)``."""
    app = make_site_app(TESTSITE)
    async for url in serve_app(app, unused_tcp_port):
        yield url, app


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests re-point the project logger at CliRunner streams; restore it afterwards."""
    yield
    configure(level="INFO")
