# link_grapher/crawler/aggregator.py
"""
Result aggregator: the single owner of the link graph.

Only the aggregator's consume loop reads or writes the graph, so it needs no
locking; workers talk to it exclusively through the results queue.
"""
from __future__ import annotations

import asyncio
from typing import List, Optional, Set

from link_grapher.crawler.domain import resolve
from link_grapher.crawler.frontier import Frontier
from link_grapher.crawler.models import PageResult
from link_grapher.graph import Graph
from link_grapher.logger import get_logger

__all__ = ("ResultAggregator",)


class ResultAggregator:
    """Records page results and decides which links are new work."""

    def __init__(self, base_host: str) -> None:
        self.base_host = base_host
        self.graph: Graph = {}
        # every URL ever submitted to the frontier, visited or not
        self._claimed: Set[str] = set()
        self.logger = get_logger("aggregator")

    def claim(self, url: str) -> None:
        self._claimed.add(url)

    def _is_claimed(self, url: str) -> bool:
        return url in self._claimed or url in self.graph

    def add(self, result: PageResult) -> List[str]:
        """
        Store the deduplicated links of *result* and return the newly
        discovered in-domain URLs, each of which is claimed here.

        A repeated site overwrites its previous entry.
        """
        unique = list(dict.fromkeys(result.links))
        self.graph[result.site] = unique
        self._claimed.add(result.site)

        fresh: List[str] = []
        for link in unique:
            if self._is_claimed(link):
                continue
            absolute, in_domain = resolve(self.base_host, link)
            if not in_domain or self._is_claimed(absolute):
                continue
            self._claimed.add(absolute)
            fresh.append(absolute)
        return fresh

    async def consume(
        self,
        results: asyncio.Queue[Optional[PageResult]],
        frontier: Frontier,
    ) -> None:
        """Aggregate results until the ``None`` sentinel arrives."""
        while True:
            result = await results.get()
            if result is None:
                break
            fresh = self.add(result)
            self.logger.debug("%s: %d links, %d new", result.site, len(result.links), len(fresh))
            # children are counted before the parent completes
            for url in fresh:
                frontier.submit(url)
            frontier.complete()
