# link_grapher/crawler/frontier.py
"""
Crawl frontier: an unbounded queue of URLs waiting to be scraped, paired with
the count of work items that have been submitted but not yet aggregated.

An empty queue is not the end of a crawl, since a worker may be mid-fetch and
about to discover more pages. The frontier therefore closes only when the
pending count drops to zero, and closing is the sole termination signal:
every blocked or later :meth:`Frontier.take` then returns ``(None, False)``.

All methods must be called from the event loop that owns the frontier.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Tuple

__all__ = ("Frontier", "FrontierClosed")


class FrontierClosed(RuntimeError):
    """Raised when work is submitted after the frontier closed."""


class Frontier:
    """Unbounded URL queue with pending-count termination."""

    def __init__(self) -> None:
        # None is the close sentinel
        self._queue: asyncio.Queue[Optional[str]] = asyncio.Queue()
        self._pending = 0
        self._closed = asyncio.Event()

    @property
    def pending(self) -> int:
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def __len__(self) -> int:
        return 0 if self.closed else self._queue.qsize()

    def submit(self, url: str) -> None:
        """Count *url* as pending and enqueue it; never blocks."""
        if self.closed:
            raise FrontierClosed(f"cannot submit {url!r}: frontier is closed")
        self._pending += 1
        self._queue.put_nowait(url)

    async def take(self) -> Tuple[Optional[str], bool]:
        """Wait for the next URL; ``(None, False)`` once the frontier is closed."""
        url = await self._queue.get()
        if url is None:
            # hand the sentinel on to the next taker
            self._queue.put_nowait(None)
            return None, False
        return url, True

    def complete(self) -> None:
        """Mark one submitted URL as aggregated; close at zero pending."""
        if self._pending <= 0:
            raise RuntimeError("complete() called with no pending work")
        self._pending -= 1
        if self._pending == 0:
            self._closed.set()
            self._queue.put_nowait(None)

    async def wait_closed(self) -> None:
        await self._closed.wait()
