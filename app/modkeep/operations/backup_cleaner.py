"""Removal of a kernel version's backup."""

import logging

from modkeep.core.errors import ConfirmationRequiredError
from modkeep.operations.base import Operation

logger = logging.getLogger(__name__)


class BackupCleaner(Operation):
    """Deletes backups, refusing to drop what may be the only copy."""

    def clean(self, version: str) -> bool:
        """Remove the backup of version.

        A live directory bind mounted from the backup counts as missing:
        deleting the backup would empty it. With force the mount is
        removed first.

        Args:
            version: Kernel version whose backup to remove.

        Returns:
            True if a backup was removed, False if there was none.

        Raises:
            ConfirmationRequiredError: If the live directory is missing or
                mounted from the backup, a backup exists and force is not set.
            DeletionError: If the mount or the backup cannot be removed.
        """
        live = self._layout.live_dir(version)
        backup = self._layout.backup_dir(version)
        if not self._inspector.exists(backup):
            logger.debug("No backup at %s", backup)
            return False

        live_exists = self._inspector.exists(live)
        mounted = live_exists and self._mounted_from(live, backup)
        if not self.force and (mounted or not live_exists):
            raise ConfirmationRequiredError(backup, live, mounted=mounted)

        if mounted:
            self._remover.remove(live)
        self._remover.remove(backup)
        return True
