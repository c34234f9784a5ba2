"""Commands run by the package manager hook.

``save`` runs before the upgrade removes files and ``restore`` after it.
Both only act on the running kernel; any other version is a no-op.
"""

import typer

from modkeep.cli.commands import KernelVersionArg, get_dispatcher
from modkeep.cli.dispatcher import Verb


def save(ctx: typer.Context, version: KernelVersionArg = None) -> None:
    """Back up the module directory of the running kernel.

    Exit status 61 when there is nothing to back up, 62 when a backup
    already exists (use --force to replace it).
    """
    raise typer.Exit(code=get_dispatcher(ctx).run(Verb.SAVE, version))


def restore(ctx: typer.Context, version: KernelVersionArg = None) -> None:
    """Restore the module directory of the running kernel from its backup.

    Exit status 9 when there is no backup, 91 when the modules are already
    linked from it, 92 when an unrelated directory is in the way, 93 when
    the backup is not ours and 94 when the directory is mounted from
    elsewhere.
    """
    raise typer.Exit(code=get_dispatcher(ctx).run(Verb.RESTORE, version))
