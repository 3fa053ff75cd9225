# File: tests/conftest.py
import asyncio
from collections import Counter
from typing import AsyncIterator, Awaitable, Callable, Dict, Iterable, List, Optional

import pytest
import pytest_asyncio
from aiohttp import web

from link_grapher.config import CrawlerConfig
from link_grapher.crawler.link_extractor import extract_links

#: placeholder replaced by "127.0.0.1:<port>" in served pages
HOST = "{host}"


class HtmlSiteScraper:
    """
    In-memory scraper: serves HTML from a dict keyed by absolute URL and runs
    the real link extractor on it. Unknown or failing URLs scrape to ``[]``.
    """

    def __init__(
        self,
        base_host: str,
        pages: Dict[str, str],
        fail: Iterable[str] = (),
        delay: float = 0.0,
    ) -> None:
        self.base_host = base_host
        self.pages = pages
        self.fail = set(fail)
        self.delay = delay
        self.calls: Counter = Counter()

    async def scrape(self, url: str) -> List[str]:
        self.calls[url] += 1
        await asyncio.sleep(self.delay)
        if url in self.fail or url not in self.pages:
            return []
        return extract_links(self.pages[url], self.base_host)


def anchors(*hrefs: str) -> str:
    """Build a small HTML page linking to *hrefs*."""
    body = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><body>{body}</body></html>"


@pytest.fixture()
def make_config() -> Callable[..., CrawlerConfig]:
    """Return a factory for CrawlerConfig with quick test defaults."""

    def _make(base_host: str, **kwargs) -> CrawlerConfig:
        params = dict(base_host=base_host, concurrency=4, timeout=2.0, progress_interval=0.5)
        params.update(kwargs)
        return CrawlerConfig(**params)

    return _make


@pytest_asyncio.fixture
async def serve_pages(
    unused_tcp_port_factory,
) -> AsyncIterator[Callable[..., Awaitable[str]]]:
    """
    Factory fixture: start a local aiohttp site from ``{path: html}`` and
    return its host (``127.0.0.1:<port>``). ``{host}`` inside the HTML is
    replaced by that host. Paths in *slow* sleep for the given seconds first.
    """
    runners: List[web.AppRunner] = []

    async def _serve(pages: Dict[str, str], slow: Optional[Dict[str, float]] = None) -> str:
        port = unused_tcp_port_factory()
        host = f"127.0.0.1:{port}"
        delays = slow or {}
        app = web.Application()

        def handler(html: str, delay: float):
            async def _handle(_):
                if delay:
                    await asyncio.sleep(delay)
                return web.Response(text=html.replace(HOST, host), content_type="text/html")

            return _handle

        for path, html in pages.items():
            app.router.add_get(path, handler(html, delays.get(path, 0.0)))

        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return host

    yield _serve

    for runner in runners:
        await runner.cleanup()
