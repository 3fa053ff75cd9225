# link_grapher/crawler/__init__.py
"""Concurrent crawl engine: frontier, worker pool, aggregator."""
from link_grapher.crawler.crawler import AsyncCrawler
from link_grapher.crawler.models import PageResult

__all__ = ["AsyncCrawler", "PageResult"]
