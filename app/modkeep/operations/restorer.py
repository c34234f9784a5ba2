"""Restore of a kernel version's module directory from its backup.

The live directory comes back either as a hardlinked copy, when backup
and modules root share a device, or as a bind mount of the backup
otherwise. A live directory that is already restored is left alone.
"""

import logging
from pathlib import Path

from modkeep.core.errors import (
    AmbiguousMountError,
    BackupNotFoundError,
    DubiousOwnershipError,
    ModkeepError,
    MountError,
    RestoreBlockedError,
)
from modkeep.models.outcome import RestoreOutcome
from modkeep.operations.base import Operation

logger = logging.getLogger(__name__)


class Restorer(Operation):
    """Re-materializes a kernel version's live module directory."""

    def restore(self, version: str) -> RestoreOutcome:
        """Restore the live module directory of version from its backup.

        Args:
            version: Kernel version to restore.

        Returns:
            What was done, or which restored state was already in place.

        Raises:
            BackupNotFoundError: If there is no backup.
            DubiousOwnershipError: If the backup is not owned by our user
                and group. Checked before anything is modified, even with
                force.
            AmbiguousMountError: If the live directory is mounted from
                somewhere other than the backup.
            RestoreBlockedError: If an unrelated live directory exists and
                force is not set.
            DeletionError: If the old live directory cannot be removed.
            ModkeepError: If the modules root cannot be created.
            CopyError: If the hardlinked copy fails.
            MountError: If the bind mount fails.
        """
        live = self._layout.live_dir(version)
        backup = self._layout.backup_dir(version)

        if not self._inspector.exists(backup):
            raise BackupNotFoundError(backup)

        self._check_ownership(backup)

        if not self._inspector.exists(live) or self.force:
            return self._materialize(live, backup)

        return self._check_existing(live, backup)

    def _check_ownership(self, backup: Path) -> None:
        info = self._stat(backup)
        uid, gid = self._inspector.principal()
        if not info.owned_by(uid, gid):
            raise DubiousOwnershipError(backup, info.uid, info.gid)

    def _materialize(self, live: Path, backup: Path) -> RestoreOutcome:
        """Replace whatever is at live with the backup's content."""
        self._remover.remove(live)
        self._ensure_dir(self._layout.modules_root, ModkeepError)

        if self._same_device(backup, self._layout.modules_root):
            self._copier.copy_tree(backup, live, hardlink=True)
            logger.info("Restored %s from %s (hardlinked)", live, backup)
            return RestoreOutcome.LINKED

        # Hardlinks cannot cross devices
        try:
            live.mkdir()
        except OSError as e:
            msg = f"Cannot create mount point {live}: {e}"
            raise MountError(msg) from e
        self._mounts.bind(backup, live)
        logger.info("Restored %s from %s (bind mount)", live, backup)
        return RestoreOutcome.MOUNTED

    def _check_existing(self, live: Path, backup: Path) -> RestoreOutcome:
        """Decide what an existing live directory means without touching it."""
        if self._inspector.is_mount_point(live):
            if self._stat(live).same_entry(self._stat(backup)):
                logger.info("%s is already mounted from %s", live, backup)
                return RestoreOutcome.ALREADY_MOUNTED
            raise AmbiguousMountError(live, backup)

        sentinel = self.settings.config.sentinel
        if self._inspector.same_file(live / sentinel, backup / sentinel):
            logger.info("%s is already linked from %s", live, backup)
            return RestoreOutcome.ALREADY_LINKED

        raise RestoreBlockedError(live)
