"""CLI command: darkcss mappings -- list the expanded mapping table."""
from __future__ import annotations

import click

from darkcss.cli.options import build_config, config_option, fail
from darkcss.emit.formatter import split_declarations
from darkcss.errors import DarkcssError
from darkcss.mapping import expand_mappings


@click.command()
@config_option
def mappings(config_path: str | None) -> None:
    """Show every concrete match key and its replacement, in emission order."""
    try:
        table = expand_mappings(build_config(config_path).mappings)
    except DarkcssError as exc:
        fail(exc)
        return

    click.echo(f"Entries: {len(table)}")
    for entry in table:
        click.echo(f"  {entry.from_key}  ->  {'; '.join(split_declarations(entry.to_template))}")
