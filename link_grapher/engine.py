# File: link_grapher/engine.py
"""link_grapher.engine: entry point that runs one crawl for a configuration."""

from __future__ import annotations

from link_grapher.config import CrawlerConfig
from link_grapher.crawler.crawler import AsyncCrawler
from link_grapher.graph import Graph

__all__ = ["start_crawl"]


async def start_crawl(cfg: CrawlerConfig) -> Graph:
    """
    Crawl ``cfg.base_host`` inside an AsyncCrawler context and return the
    compressed link graph.
    """
    async with AsyncCrawler(cfg) as crawler:
        return await crawler.crawl()
