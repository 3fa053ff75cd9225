# link_grapher/crawler/scraper.py
"""
Page scraper: fetch one URL and list the in-domain links found on it.
"""
from __future__ import annotations

from typing import List, Protocol

from link_grapher.crawler.fetcher import Fetcher
from link_grapher.crawler.link_extractor import extract_links
from link_grapher.logger import get_logger


class Scraper(Protocol):
    """Anything the worker pool can ask for the links of a page."""

    async def scrape(self, url: str) -> List[str]:
        ...


class PageScraper:
    """Fetcher plus link extractor bound to one crawl host."""

    def __init__(self, fetcher: Fetcher, base_host: str) -> None:
        self.fetcher = fetcher
        self.base_host = base_host
        self.logger = get_logger("scraper")

    async def scrape(self, url: str) -> List[str]:
        """Return the in-domain links of *url*; ``[]`` when the page failed."""
        try:
            body = await self.fetcher.fetch(url)
            if body is None:
                return []
            return extract_links(body, self.base_host, url)
        except Exception:
            # one broken page must not stop the crawl
            self.logger.exception("Scraping %s failed", url)
            return []
