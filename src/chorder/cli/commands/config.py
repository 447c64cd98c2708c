"""Config commands: locate, show and validate the configuration document."""

import sys
from pathlib import Path
from typing import Optional

import click

from chorder.exceptions import ConfigurationError, format_error_for_display
from chorder.services import ConfigService


def _service(ctx: click.Context, config_path: Optional[Path]) -> ConfigService:
    path = config_path or (ctx.obj or {}).get("config_path")
    return ConfigService(path)


def _fail(error: ConfigurationError) -> None:
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)


config_path_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: $XDG_CONFIG_HOME/chorder/config.json)",
)


@click.group(name="config")
def config():
    """Inspect the launcher configuration."""
    pass


@config.command(name="path")
@config_path_option
@click.pass_context
def path(ctx: click.Context, config_path: Optional[Path]):
    """Print the configuration file location."""
    click.echo(str(_service(ctx, config_path).path))


@config.command(name="show")
@config_path_option
@click.pass_context
def show(ctx: click.Context, config_path: Optional[Path]):
    """Print the configuration with every default filled in."""
    try:
        loaded = _service(ctx, config_path).load()
    except ConfigurationError as e:
        _fail(e)
        return
    click.echo(loaded.model_dump_json(indent=2))


@config.command(name="validate")
@config_path_option
@click.pass_context
def validate(ctx: click.Context, config_path: Optional[Path]):
    """Check the configuration without writing it back."""
    service = _service(ctx, config_path)
    try:
        loaded = service.load()
    except ConfigurationError as e:
        _fail(e)
        return

    click.echo(f"Configuration is valid: {service.path}")
    click.echo(f"  Grid: {loaded.max_rows} rows x {loaded.max_columns} columns")
    for page, records in loaded.options.items():
        click.echo(f"  Page '{page}': {len(records)}/{loaded.capacity} slots")
