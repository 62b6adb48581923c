"""darkcss CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging

import click

from darkcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="darkcss")
@click.option("-v", "--verbose", is_flag=True, help="Log every fetch and fallback")
def cli(verbose: bool) -> None:
    """darkcss - regenerate dark-theme rules from upstream stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from darkcss.cli.generate import generate  # noqa: E402
from darkcss.cli.mappings import mappings  # noqa: E402
from darkcss.cli.match import match  # noqa: E402

cli.add_command(generate)
cli.add_command(match)
cli.add_command(mappings)
