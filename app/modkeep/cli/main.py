"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from modkeep import __version__
from modkeep.cli.commands import clean, hook, status
from modkeep.core.config import load_settings
from modkeep.core.errors import ConfigError
from modkeep.utils.formatting import err_console, print_error

# Create main Typer app
app = typer.Typer(
    name="modkeep",
    help="Keep the running kernel's modules across package upgrades.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"modkeep version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich.

    Args:
        verbose: Trace every decision at DEBUG level instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Trace every decision on stderr.",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Override the safety checks of the command.",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file (default: /etc/modkeep.toml).",
        ),
    ] = None,
) -> None:
    """modkeep - keep the running kernel's modules across package upgrades.

    Run [bold]save[/bold] before the package manager removes files and
    [bold]restore[/bold] after it, so modules stay loadable until reboot.
    """
    configure_logging(verbose)

    try:
        settings = load_settings(config, force=force)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    # Store settings in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# Register commands
app.command(name="save")(hook.save)
app.command(name="restore")(hook.restore)
app.command(name="bakclean")(clean.bakclean)
app.command(name="modclean")(clean.modclean)
app.command(name="status")(status.status)


if __name__ == "__main__":
    app()
