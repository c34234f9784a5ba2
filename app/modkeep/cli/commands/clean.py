"""Cleanup commands for backups and orphaned module directories."""

import typer

from modkeep.cli.commands import KernelVersionArg, get_dispatcher
from modkeep.cli.dispatcher import Verb


def bakclean(ctx: typer.Context, version: KernelVersionArg = None) -> None:
    """Remove the backup of a kernel version.

    Exit status 10 when the version has no live module directory left, so
    the backup may be the only copy (use --force to remove it anyway).
    """
    raise typer.Exit(code=get_dispatcher(ctx).run(Verb.BAKCLEAN, version))


def modclean(ctx: typer.Context) -> None:
    """Remove module directories no installed package owns.

    The running kernel's directory is never removed without --force. Exit
    status 11 when the running kernel has no module directory, 12 when it
    would be removed, otherwise the number of directories that could not
    be removed.
    """
    raise typer.Exit(code=get_dispatcher(ctx).run(Verb.MODCLEAN))
