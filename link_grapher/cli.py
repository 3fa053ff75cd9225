# === FILE: link_grapher/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of LinkGrapher.

Usage:
  grapher [OPTIONS] BASEHOST

BASEHOST is a bare host name such as ``example.com`` (no scheme). The crawl
starts at ``http://BASEHOST`` and follows same-host links only; the resulting
link graph is printed to stdout. Progress and fetch errors go to stderr.

Options:
  --config PATH       YAML/JSON file with crawl settings
  --concurrency INT   Number of concurrent fetch workers (default 100)
  --timeout SEC       Timeout of a single page fetch (default 10)
  --format FORMAT     Output format: dot (default) or json
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Also write logs to this file
  --version, -v       Show the LinkGrapher version

Example:
  grapher example.com > example.dot
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_grapher import __version__
from link_grapher.config import load_config
from link_grapher.engine import start_crawl
from link_grapher.logger import init_logging
from link_grapher.report import RENDERERS

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

USAGE = "Usage is: grapher basehost\ngrapher builds a link graph of a host domain"


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkGrapher, version %(version)s')
@click.argument('hosts', nargs=-1)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option(
    '--concurrency', '-n', 'concurrency',
    type=int,
    default=None,
    help='Number of concurrent fetch workers (overrides the config file).'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Timeout of a single page fetch in seconds (overrides the config file).'
)
@click.option(
    '--format', '-f', 'output_format',
    default='dot', show_default=True,
    type=click.Choice(sorted(RENDERERS)),
    help='Output format of the graph.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also write logs to this file'
)
def cli(hosts, config_path, concurrency, timeout, output_format, log_level, log_file):
    """Crawl BASEHOST and print its link graph."""
    if len(hosts) != 1:
        click.echo(USAGE)
        return

    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    overrides = {"base_host": hosts[0]}
    if concurrency is not None:
        overrides["concurrency"] = concurrency
    if timeout is not None:
        overrides["timeout"] = timeout
    try:
        cfg = load_config(config_path, **overrides)
    except (ValidationError, ValueError, TypeError, OSError) as e:
        print_error(f'Configuration error: {e}')

    graph = asyncio.run(start_crawl(cfg))
    click.echo(RENDERERS[output_format](graph), nl=False)


if __name__ == "__main__":
    cli()
