# link_grapher/__init__.py
"""
LinkGrapher package initializer.
Defines package version and exposes the CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point
from link_grapher.cli import cli as main_cli  # noqa: E402
