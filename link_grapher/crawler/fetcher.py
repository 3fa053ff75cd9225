# link_grapher/crawler/fetcher.py
"""
Fetcher module: a single HTTP GET per page with a per-request timeout.
"""
from __future__ import annotations

import asyncio
from typing import List, Optional

from aiohttp import ClientError, ClientPayloadError, ClientSession

from link_grapher.logger import get_logger

_CHUNK_SIZE = 64 * 1024


class Fetcher:
    """Downloads page bodies; never raises on network trouble."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session
        self.logger = get_logger("fetcher")

    async def fetch(self, url: str) -> Optional[bytes]:
        """
        GET *url* and return its body.

        Returns None on transport failure or timeout. Error statuses are not
        special: their body is returned like any other. A body cut short
        mid-stream returns whatever arrived before the cut.
        """
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    self.logger.debug("HTTP %s for %s", resp.status, url)
                chunks: List[bytes] = []
                try:
                    async for chunk in resp.content.iter_chunked(_CHUNK_SIZE):
                        chunks.append(chunk)
                except ClientPayloadError as exc:
                    self.logger.warning("Truncated body %s: %s", url, exc)
                return b"".join(chunks)
        except asyncio.TimeoutError:
            self.logger.warning("Timed out fetching %s", url)
            return None
        except ClientError as exc:
            self.logger.warning("Failed %s: %s", url, exc)
            return None
