"""stylegen CLI entry point: Click group with subcommands."""

import logging

import click

from stylegen import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylegen")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """stylegen - generate namespaced CSS from nested style trees."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from stylegen.cli.render import render  # noqa: E402
from stylegen.cli.check import check  # noqa: E402
from stylegen.cli.properties import properties  # noqa: E402

cli.add_command(render)
cli.add_command(check)
cli.add_command(properties)
