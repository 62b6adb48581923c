"""Options and helpers shared by the CLI commands."""
from __future__ import annotations

import sys
from typing import Any

import click

from darkcss.config import GeneratorConfig, load_config
from darkcss.errors import DarkcssError

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file overriding the built-in tables",
)


def build_config(config_path: str | None, **overrides: Any) -> GeneratorConfig:
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if config_path:
        return load_config(config_path, **overrides)
    return GeneratorConfig(**overrides)


def fail(exc: DarkcssError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)
