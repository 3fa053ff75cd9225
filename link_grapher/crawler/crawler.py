# === FILE: link_grapher/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout

from link_grapher.config import CrawlerConfig
from link_grapher.crawler.aggregator import ResultAggregator
from link_grapher.crawler.domain import root_url
from link_grapher.crawler.fetcher import Fetcher
from link_grapher.crawler.frontier import Frontier
from link_grapher.crawler.models import PageResult
from link_grapher.crawler.scraper import PageScraper, Scraper
from link_grapher.graph import Graph, compress_graph
from link_grapher.logger import get_logger

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """Concurrent single-host crawler producing a compressed link graph."""

    def __init__(self, config: CrawlerConfig, scraper: Optional[Scraper] = None) -> None:
        self.config = config
        self.scraper: Optional[Scraper] = scraper
        self.session: Optional[ClientSession] = None
        self.pages_scraped = 0
        self.logger = get_logger("crawler")

    async def __aenter__(self) -> AsyncCrawler:
        if self.scraper is None:
            timeout = ClientTimeout(total=self.config.timeout)
            self.session = ClientSession(
                timeout=timeout,
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.scraper = PageScraper(Fetcher(self.session), self.config.base_host)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> Graph:
        if self.scraper is None:
            raise RuntimeError("Crawler not entered; use 'async with AsyncCrawler(...)'")
        root = root_url(self.config.base_host)
        self.logger.info("Starting crawl: %s", root)
        start = time.monotonic()

        frontier = Frontier()
        results: asyncio.Queue[Optional[PageResult]] = asyncio.Queue()
        aggregator = ResultAggregator(self.config.base_host)
        aggregator.claim(root)
        frontier.submit(root)

        workers = [
            asyncio.create_task(self._worker(frontier, results), name=f"worker-{i}")
            for i in range(self.config.concurrency)
        ]
        pool = asyncio.create_task(self._drain_pool(workers, results))
        progress = asyncio.create_task(self._report_progress(frontier))
        try:
            await aggregator.consume(results, frontier)
            await pool
        finally:
            for task in (*workers, pool, progress):
                task.cancel()
            await asyncio.gather(*workers, pool, progress, return_exceptions=True)

        graph = compress_graph(aggregator.graph)
        duration = time.monotonic() - start
        self.logger.info(
            "Finished: %d pages in %.2f s (%.2f pages/s)",
            self.pages_scraped, duration, self.pages_scraped / duration if duration else 0,
        )
        return graph

    async def _worker(self, frontier: Frontier, results: asyncio.Queue[Optional[PageResult]]) -> None:
        assert self.scraper is not None
        while True:
            url, ok = await frontier.take()
            if not ok:
                return
            links = await self.scraper.scrape(url)
            self.pages_scraped += 1
            await results.put(PageResult(url, tuple(links)))

    @staticmethod
    async def _drain_pool(
        workers: List[asyncio.Task[None]],
        results: asyncio.Queue[Optional[PageResult]],
    ) -> None:
        try:
            await asyncio.gather(*workers)
        finally:
            # unblock the aggregator even if a worker died
            results.put_nowait(None)

    async def _report_progress(self, frontier: Frontier) -> None:
        interval = self.config.progress_interval
        while not frontier.closed:
            try:
                await asyncio.wait_for(frontier.wait_closed(), timeout=interval)
            except asyncio.TimeoutError:
                self.logger.info("Currently %d items in queue", len(frontier))
