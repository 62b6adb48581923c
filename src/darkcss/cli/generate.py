"""CLI command: darkcss generate -- fetch upstream CSS and rewrite the target file."""
from __future__ import annotations

import click

from darkcss.cli.options import build_config, config_option, fail
from darkcss.errors import DarkcssError
from darkcss.pipeline import Generator
from darkcss.splice import write_block


@click.command()
@config_option
@click.option("--target", type=click.Path(dir_okay=False), default=None, help="Stylesheet to update")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the block instead of writing it")
def generate(config_path: str | None, target: str | None, to_stdout: bool) -> None:
    """Fetch every source and regenerate the auto-generated rule block.

    Nothing is written unless every fetch succeeds.
    """
    try:
        config = build_config(config_path, target_file=target)
        block = Generator(config).run()
        if to_stdout:
            click.echo(block)
            return
        changed = write_block(config.target_file, block)
    except DarkcssError as exc:
        fail(exc)
        return

    click.echo(f"{config.target_file}: {'updated' if changed else 'unchanged'}")
