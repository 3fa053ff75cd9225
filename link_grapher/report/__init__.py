# File: link_grapher/report/__init__.py
"""link_grapher.report: text renderers for the link graph, used by the CLI."""

from __future__ import annotations

from link_grapher.report.dot_report import render_dot
from link_grapher.report.json_report import render_json

RENDERERS = {
    "dot": render_dot,
    "json": render_json,
}

__all__ = ["render_dot", "render_json", "RENDERERS"]
