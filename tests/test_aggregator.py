# File: tests/test_aggregator.py
import asyncio

import pytest

from link_grapher.crawler.aggregator import ResultAggregator
from link_grapher.crawler.frontier import Frontier
from link_grapher.crawler.models import PageResult

HOST = "h.com"
ROOT = "http://h.com"


def url(path: str) -> str:
    return f"{ROOT}{path}"


def test_dedup_links():
    agg = ResultAggregator(HOST)
    agg.claim(ROOT)
    fresh = agg.add(PageResult(ROOT, (url("/x"), url("/x"), url("/y"))))

    assert set(agg.graph[ROOT]) == {url("/x"), url("/y")}
    assert len(agg.graph[ROOT]) == 2
    assert fresh == [url("/x"), url("/y")]


def test_visited_and_claimed_links_are_not_rescheduled():
    agg = ResultAggregator(HOST)
    agg.claim(ROOT)
    assert agg.add(PageResult(ROOT, (url("/a"), url("/b")))) == [url("/a"), url("/b")]

    # /a links back to the root (visited) and to /b (claimed, not yet visited)
    assert agg.add(PageResult(url("/a"), (ROOT, url("/b"), url("/c")))) == [url("/c")]
    # a second page discovering /c does not schedule it again
    assert agg.add(PageResult(url("/b"), (url("/c"),))) == []


def test_out_of_domain_links_are_recorded_but_not_scheduled():
    agg = ResultAggregator(HOST)
    fresh = agg.add(PageResult(ROOT, ("http://other.com/z", url("/in"))))
    assert fresh == [url("/in")]
    assert agg.graph[ROOT] == ["http://other.com/z", url("/in")]


def test_relative_links_are_resolved_before_scheduling():
    agg = ResultAggregator(HOST)
    assert agg.add(PageResult(ROOT, ("/rel",))) == [url("/rel")]


def test_failed_page_is_visited_with_no_links():
    agg = ResultAggregator(HOST)
    assert agg.add(PageResult(url("/broken"))) == []
    assert agg.graph[url("/broken")] == []


def test_repeated_site_last_write_wins():
    agg = ResultAggregator(HOST)
    agg.add(PageResult(ROOT, (url("/old"),)))
    agg.add(PageResult(ROOT, (url("/new"),)))
    assert agg.graph[ROOT] == [url("/new")]


@pytest.mark.asyncio()
async def test_consume_submits_children_before_completing():
    frontier = Frontier()
    agg = ResultAggregator(HOST)
    agg.claim(ROOT)
    frontier.submit(ROOT)
    await frontier.take()

    results: asyncio.Queue = asyncio.Queue()
    results.put_nowait(PageResult(ROOT, (url("/1"), url("/2"), url("/1"))))
    results.put_nowait(None)
    await asyncio.wait_for(agg.consume(results, frontier), timeout=1)

    assert not frontier.closed
    assert frontier.pending == 2
    assert await frontier.take() == (url("/1"), True)
    assert await frontier.take() == (url("/2"), True)


@pytest.mark.asyncio()
async def test_consume_closes_frontier_on_last_leaf():
    frontier = Frontier()
    agg = ResultAggregator(HOST)
    agg.claim(ROOT)
    frontier.submit(ROOT)
    await frontier.take()

    results: asyncio.Queue = asyncio.Queue()
    results.put_nowait(PageResult(ROOT, (ROOT,)))
    results.put_nowait(None)
    await asyncio.wait_for(agg.consume(results, frontier), timeout=1)

    assert frontier.closed
    assert agg.graph == {ROOT: [ROOT]}
