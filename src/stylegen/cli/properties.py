"""CLI command: stylegen properties -- list recognised property names."""

from __future__ import annotations

import click

from stylegen.validation import ALL_PROPERTIES


@click.command()
@click.argument("prefix", required=False, default="")
def properties(prefix: str) -> None:
    """List recognised property names, optionally only those starting with PREFIX."""
    prefix = prefix.replace("_", "-")
    for name in sorted(ALL_PROPERTIES):
        if name.startswith(prefix):
            click.echo(name)
