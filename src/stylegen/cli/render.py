"""CLI command: stylegen render -- turn a style file into CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylegen.config import RenderMode, RenderOptions
from stylegen.errors import StyleError
from stylegen.parser import ParseError, parse_style
from stylegen.pipeline import generate


@click.command()
@click.argument("stylefile", type=click.Path(exists=True))
@click.option("--pretty", is_flag=True, help="Indented output instead of minified")
@click.option("--namespace", default=None, help="Prefix class selectors with NAMESPACE")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write CSS to this file instead of stdout",
)
def render(stylefile: str, pretty: bool, namespace: str | None, output: str | None) -> None:
    """Parse a style file and print the generated CSS."""
    style_path = Path(stylefile)

    try:
        sheet = parse_style(style_path.read_text(encoding="utf-8"))
        options = RenderOptions(
            mode=RenderMode.PRETTY if pretty else RenderMode.COMPACT,
            namespace=namespace,
        )
        css = generate(sheet, options)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line and exc.line > 0 else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(css + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}")
    else:
        click.echo(css)
