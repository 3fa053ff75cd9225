# File: link_grapher/graph.py
"""link_grapher.graph: the link graph type, its compression and node labelling."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

__all__ = ["Graph", "compress_graph", "label_nodes", "iter_edges"]

#: visited site URL -> distinct in-domain URLs it links to
Graph = Dict[str, List[str]]


def compress_graph(graph: Graph) -> Graph:
    """Drop edges to URLs that are not keys, i.e. were never visited."""
    return {site: [link for link in links if link in graph] for site, links in graph.items()}


def label_nodes(graph: Graph) -> Dict[str, str]:
    """Give every site a short label ``N<index>`` in graph order."""
    return {site: f"N{index}" for index, site in enumerate(graph)}


def iter_edges(graph: Graph) -> Iterator[Tuple[str, str]]:
    """Yield ``(source, destination)`` label pairs; edges to unlabelled URLs are skipped."""
    labels = label_nodes(graph)
    for site, links in graph.items():
        source = labels[site]
        for link in links:
            dest = labels.get(link)
            if dest is not None:
                yield source, dest
