"""Outcome models for modkeep operations.

This module defines the results operations return when they succeed,
including the idempotent "nothing to do" variants of save and restore.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from modkeep.filesystem.remover import RemovalResult


class SaveOutcome(Enum):
    """How a backup was created.

    Attributes:
        LINKED: Files were hardlinked (backup shares the live tree's device).
        COPIED: File data was copied (backup lives on another device).
        ALREADY_MOUNTED: Live directory is bind mounted from the backup, so
            the backup already holds it and nothing was copied.
    """

    LINKED = "linked"
    COPIED = "copied"
    ALREADY_MOUNTED = "already_mounted"


class RestoreOutcome(Enum):
    """What restore did, or found already done.

    Attributes:
        LINKED: Live directory recreated as a hardlinked copy of the backup.
        MOUNTED: Backup bind mounted onto the live directory.
        ALREADY_MOUNTED: Live directory already bind mounted from the backup.
        ALREADY_LINKED: Live directory already hardlinked from the backup.
    """

    LINKED = "linked"
    MOUNTED = "mounted"
    ALREADY_MOUNTED = "already_mounted"
    ALREADY_LINKED = "already_linked"

    @property
    def changed(self) -> bool:
        """Check whether the restore modified the filesystem."""
        return self in (RestoreOutcome.LINKED, RestoreOutcome.MOUNTED)


@dataclass(slots=True)
class OrphanCleanReport:
    """Result of a modclean run.

    Attributes:
        kept: Directories owned by an installed package.
        results: One removal result per unowned directory.
    """

    kept: list[Path] = field(default_factory=list)
    results: list[RemovalResult] = field(default_factory=list)

    @property
    def removed(self) -> list[Path]:
        """Directories that were removed."""
        return [r.path for r in self.results if r.success]

    @property
    def failures(self) -> list[RemovalResult]:
        """Removals that failed."""
        return [r for r in self.results if not r.success]

    @property
    def exit_code(self) -> int:
        """Number of failed removals, capped to a valid exit status."""
        return min(len(self.failures), 255)


@dataclass(frozen=True, slots=True)
class VersionStatus:
    """Read-only view of one kernel version's live and backup state.

    Attributes:
        version: Kernel version.
        live: Live module directory.
        backup: Backup directory.
        live_exists: Whether the live directory exists.
        live_mounted: Whether the live directory is a mount point.
        backup_exists: Whether the backup directory exists.
        backup_trusted: Whether the backup is owned by the running user and group.
        same_device: Whether backup and modules root share a device, so
            restore would hardlink rather than bind mount.
        linked: Whether the live sentinel file is the backup's sentinel file.
    """

    version: str
    live: Path
    backup: Path
    live_exists: bool
    live_mounted: bool
    backup_exists: bool
    backup_trusted: bool
    same_device: bool
    linked: bool
