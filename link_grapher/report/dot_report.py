# File: link_grapher/report/dot_report.py
"""link_grapher.report.dot_report: Graphviz DOT rendering of the link graph with Jinja2."""

from __future__ import annotations

from jinja2 import Environment, PackageLoader

from link_grapher.graph import Graph, iter_edges

_TEMPLATE = "graph.dot.j2"


def _environment() -> Environment:
    # DOT is not HTML: no autoescaping, and the closing newline is part of the format
    return Environment(
        loader=PackageLoader("link_grapher", "templates"),
        autoescape=False,
        keep_trailing_newline=True,
    )


def render_dot(graph: Graph) -> str:
    """Render *graph* as a ``digraph Scraped { ... }`` document.

    Nodes are labelled ``N<index>`` in graph order, and each edge becomes one
    ``\\tNSRC -> NDST; `` line.

    Example:
    ```python
    from link_grapher.report.dot_report import render_dot
    print(render_dot({"http://a.com": ["http://a.com/1"], "http://a.com/1": []}), end="")
    ```
    """
    template = _environment().get_template(_TEMPLATE)
    return template.render(edges=list(iter_edges(graph)))
