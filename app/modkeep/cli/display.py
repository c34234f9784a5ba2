"""Rich display functions for modkeep results."""

from modkeep.models.outcome import OrphanCleanReport, VersionStatus
from modkeep.utils.formatting import (
    console,
    create_table,
    print_info,
    print_success,
    print_warning,
    yes_no,
)


def print_clean_report(report: OrphanCleanReport) -> None:
    """Display the directories modclean removed or failed to remove.

    Args:
        report: Report returned by OrphanCleaner.clean().
    """
    if not report.results:
        print_info(f"No orphaned module directories ({len(report.kept)} owned).")
        return

    table = create_table("Module Cleanup", "Directory", "Status", "Details")
    for result in report.results:
        if result.success:
            table.add_row(str(result.path), "[success]removed[/]", "")
        else:
            table.add_row(str(result.path), "[error]failed[/]", result.error or "Unknown error")
    console.print(table)

    if report.failures:
        print_warning(f"{len(report.removed)} removed, {len(report.failures)} failed")
    else:
        print_success(f"Removed {len(report.removed)} orphaned module director(y/ies).")


def print_status(status: VersionStatus, backups: list[str], running: str) -> None:
    """Display the state of one kernel version and the list of backups.

    Args:
        status: Snapshot from StatusReporter.status().
        backups: Versions with a backup.
        running: Running kernel version.
    """
    suffix = " (running)" if status.version == running else ""
    table = create_table(f"Kernel {status.version}{suffix}", "Check", "Value")
    table.add_row("Live directory", str(status.live))
    table.add_row("Live exists", yes_no(status.live_exists))
    table.add_row("Live is a mount point", yes_no(status.live_mounted))
    table.add_row("Backup directory", str(status.backup))
    table.add_row("Backup exists", yes_no(status.backup_exists))
    if status.backup_exists:
        table.add_row("Backup owned by us", yes_no(status.backup_trusted))
        table.add_row("Restore strategy", "hardlink" if status.same_device else "bind mount")
    table.add_row("Live linked from backup", yes_no(status.linked))
    console.print(table)

    if backups:
        console.print(f"\n[dim]Backups: {', '.join(backups)}[/dim]")
    else:
        console.print("\n[dim]No backups.[/dim]")
