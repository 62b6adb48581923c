"""CLI command: darkcss match -- run the mapping table over local CSS files."""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from darkcss.cli.options import build_config, config_option, fail
from darkcss.config import Source
from darkcss.errors import DarkcssError
from darkcss.pipeline import Generator


@click.command()
@click.argument("cssfiles", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@config_option
@click.option("--prefix", default=None, help="Prefix for every collected selector")
@click.option("--match", "match_", multiple=True, help="Leave selectors whose head contains this unprefixed")
def match(cssfiles: tuple[str, ...], config_path: str | None, prefix: str | None, match_: tuple[str, ...]) -> None:
    """Print the rule block generated from local CSSFILES.

    Files are treated as sources in the order given.
    """
    try:
        config = build_config(config_path)
        sources = tuple(Source(url=path, prefix=prefix, match=match_) for path in cssfiles)
        config = replace(config, sources=sources)
        css = [Path(path).read_text(encoding="utf-8") for path in cssfiles]
        block = Generator(config).generate_from_css(css)
    except DarkcssError as exc:
        fail(exc)
        return
    click.echo(block)
