"""CLI command: stylegen check -- parse a style file and validate its properties."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylegen.errors import StyleError
from stylegen.parser import ParseError, parse_style


@click.command()
@click.argument("stylefile", type=click.Path(exists=True))
def check(stylefile: str) -> None:
    """Parse a style file, exiting with code 1 on the first error."""
    style_path = Path(stylefile)

    try:
        sheet = parse_style(style_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except StyleError as exc:
        click.echo(f"Invalid: {exc}", err=True)
        sys.exit(1)

    count = sum(1 for node in sheet for _ in node.walk())
    click.echo(f"OK: {style_path.name} ({count} rule(s))")
