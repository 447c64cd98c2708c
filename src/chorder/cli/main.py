"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from chorder import __version__
from chorder.exceptions import ConfigIOError

from .commands import config, keys

logger = logging.getLogger(__name__)


def default_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where logs go for a given set of flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "chorder-debug.log"

    from chorder.services import app_config_dir

    return app_config_dir() / "logs" / "chorder.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    The TUI owns stdout, so logs always go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG to ./chorder-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level used together with --log-file

    Returns:
        The log file path

    Raises:
        ConfigIOError: The log directory or file could not be created
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = default_log_path(debug, log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(str(log_path.parent), "create directory", e.strerror or str(e)) from e

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Keeps last 5 files, max 10MB each
    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
    except OSError as e:
        raise ConfigIOError(str(log_path), "open", e.strerror or str(e)) from e
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="chorder")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="CHORDER_CONFIG",
    help="Configuration file (default: $XDG_CONFIG_HOME/chorder/config.json)",
)
@click.option(
    "--page",
    "-p",
    type=str,
    default="main",
    show_default=True,
    help="Page shown at startup",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v: INFO, -vv: DEBUG)")
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug mode (DEBUG level, logs to ./chorder-debug.log)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Custom log file path",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level used with --log-file (default: INFO)",
)
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    page: str,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
):
    """
    Chorder - keyboard-driven launcher grid.

    Each page of the grid binds key combinations to actions: switch to
    another page, run a program, or run a script. Press a bound combination
    to fire it, or Escape to quit.

    Shortcuts are written as modifier prefixes a- (Alt), c- (Control),
    m- (Super), s- (Shift), in that order, followed by the lower-case key
    name, e.g. "c-s-a".

    \b
    Examples:
      # Start on the main page
      chorder

      # Start on another page
      chorder --page tools

      # Check the configuration
      chorder config validate

      # Canonical form of Ctrl+Shift+A
      chorder keys a ctrl shift
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports keep subcommands free of the TUI stack
    from chorder.exceptions import ErrorContext, format_error_for_display
    from chorder.services import ConfigService
    from chorder.tui import ChorderApp

    log_path: Optional[Path] = None
    try:
        log_path = setup_logging(verbose, debug, log_file, log_level)
        logger.info("Starting Chorder")

        with ErrorContext("load configuration", logger_instance=logger):
            config_obj = ConfigService(config_path).load_and_persist()
        app = ChorderApp(config_obj, initial_page=page)
        app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        sys.exit(0)
    except Exception as e:
        if log_path is not None:
            logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        if log_path is not None:
            click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)

    sys.exit(app.return_code or 0)


cli.add_command(config)
cli.add_command(keys)

if __name__ == "__main__":
    cli()
