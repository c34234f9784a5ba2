"""CLI commands for modkeep.

This package contains all subcommand implementations.
"""

from typing import Annotated

import typer

from modkeep.cli.dispatcher import Dispatcher

KernelVersionArg = Annotated[
    str | None,
    typer.Argument(
        metavar="[KVER]",
        help="Kernel version (default: the running kernel).",
        show_default=False,
    ),
]


def get_dispatcher(ctx: typer.Context) -> Dispatcher:
    """Build the dispatcher from the settings stored by the main callback."""
    return Dispatcher(ctx.obj["settings"])
