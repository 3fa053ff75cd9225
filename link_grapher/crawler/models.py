# link_grapher/crawler/models.py
"""
Data models for the LinkGrapher crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class PageResult:
    """Outcome of scraping one site: its URL and the in-domain links found on it.

    ``links`` keeps document order and may contain duplicates; an empty tuple
    also stands for a page that could not be fetched.
    """

    site: str
    links: Tuple[str, ...] = ()
