"""Status command showing live and backup module directories."""

import typer

from modkeep.cli.commands import KernelVersionArg, get_dispatcher
from modkeep.cli.dispatcher import Verb


def status(ctx: typer.Context, version: KernelVersionArg = None) -> None:
    """Show the live and backup state of a kernel version."""
    raise typer.Exit(code=get_dispatcher(ctx).run(Verb.STATUS, version))
