"""Backup of a kernel version's live module directory.

Run before the package manager removes files, so the running kernel's
modules survive the upgrade in the backup root.
"""

import logging

from modkeep.core.errors import BackupExistsError, CopyError, MissingSourceError
from modkeep.models.outcome import SaveOutcome
from modkeep.operations.base import Operation

logger = logging.getLogger(__name__)


class Saver(Operation):
    """Creates or refreshes the backup of one kernel version."""

    def save(self, version: str) -> SaveOutcome:
        """Back up the live module directory of version.

        An existing backup is never overwritten unless force is set, so
        repeated saves keep the first good copy.

        Args:
            version: Kernel version to back up.

        Returns:
            SaveOutcome.LINKED when files were hardlinked, COPIED when they
            were copied, ALREADY_MOUNTED when a forced save finds the live
            directory bind mounted from the backup.

        Raises:
            MissingSourceError: If the live directory does not exist.
            BackupExistsError: If a backup exists and force is not set.
            DeletionError: If the previous backup cannot be removed.
            CopyError: If the copy fails.
        """
        live = self._layout.live_dir(version)
        backup = self._layout.backup_dir(version)

        if not self._inspector.exists(live):
            raise MissingSourceError(live)

        if self._inspector.exists(backup):
            if not self.force:
                raise BackupExistsError(backup)
            # Removing the backup would empty the live mount before the copy
            if self._mounted_from(live, backup):
                logger.info("%s is mounted from %s, nothing to save", live, backup)
                return SaveOutcome.ALREADY_MOUNTED

        self._remover.remove(backup)
        self._ensure_dir(self._layout.backup_root, CopyError)

        hardlink = self._same_device(live, self._layout.backup_root)
        self._copier.copy_tree(live, backup, hardlink=hardlink)

        outcome = SaveOutcome.LINKED if hardlink else SaveOutcome.COPIED
        logger.info("Saved %s to %s (%s)", live, backup, outcome.value)
        return outcome
