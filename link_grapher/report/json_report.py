# link_grapher/report/json_report.py

"""
JSON rendering of the link graph.

Nodes are the visited URLs, edges are ``[source, destination]`` URL pairs.
"""
import json

from link_grapher.graph import Graph


def render_json(graph: Graph, *, pretty: bool = False) -> str:
    """Serialize *graph* to a JSON string."""
    data = {
        "nodes": list(graph),
        "edges": [[site, link] for site, links in graph.items() for link in links if link in graph],
    }
    return json.dumps(data, ensure_ascii=False, indent=2 if pretty else None)
