# link_grapher/crawler/link_extractor.py
"""
Link extraction for LinkGrapher: anchors in, in-domain absolute URLs out.
"""
from __future__ import annotations

from typing import List, Optional, Union

from bs4 import BeautifulSoup, SoupStrainer
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from link_grapher.crawler.domain import resolve
from link_grapher.logger import get_logger

__all__ = ("extract_links",)

# only <a> tags are built into the tree
ANCHOR_STRAINER = SoupStrainer("a")

# html.parser first, lxml when it rejects the markup
PARSERS = ("html.parser", "lxml")

logger = get_logger("extractor")


def _parse(content: Union[str, bytes], source: str) -> Optional[BeautifulSoup]:
    for parser in PARSERS:
        try:
            return BeautifulSoup(content, parser, parse_only=ANCHOR_STRAINER)
        except ParserRejectedMarkup as exc:
            logger.warning("Markup of %s rejected by %s: %s", source, parser, exc)
    return None


def extract_links(content: Union[str, bytes], base_host: str, source: str = "") -> List[str]:
    """
    Extract every in-domain URL referenced by an ``<a href>`` in *content*.

    Links keep document order and duplicates. Hrefs that do not resolve to
    *base_host* (other hosts, mailto:, javascript:, malformed URLs) are dropped.
    *source* names the page in log messages.
    """
    soup = _parse(content, source or base_host)
    if soup is None:
        return []

    links: List[str] = []
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        absolute, in_domain = resolve(base_host, href.strip())
        if in_domain:
            links.append(absolute)
    return links
