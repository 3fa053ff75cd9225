# link_grapher/crawler/domain.py
"""
URL resolution against the crawl host and the same-host check.
"""
from __future__ import annotations

from typing import Tuple
from urllib.parse import urljoin, urlsplit, urlunsplit

__all__ = ("BASE_SCHEME", "root_url", "resolve")

BASE_SCHEME = "http"


def root_url(base_host: str) -> str:
    """Return the URL every crawl of *base_host* starts from."""
    return urlunsplit((BASE_SCHEME, base_host, "", "", ""))


def _host(url: str) -> str:
    # netloc without userinfo; the port stays part of the host
    return urlsplit(url).netloc.rpartition("@")[2]


def resolve(base_host: str, candidate: str) -> Tuple[str, bool]:
    """
    Resolve *candidate* (relative or absolute) against ``http://<base_host>``.

    Returns the absolute URL and whether its host is exactly *base_host*.
    Unparseable candidates give ``("", False)``.
    """
    try:
        absolute = urljoin(root_url(base_host), candidate)
        host = _host(absolute)
    except ValueError:
        return "", False
    return absolute, host == base_host
