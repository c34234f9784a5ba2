"""Read-only report of live and backup module directories."""

import logging

from modkeep.core.errors import InvalidKernelVersionError
from modkeep.core.kernel import validate_kernel_version
from modkeep.models.outcome import VersionStatus
from modkeep.operations.base import Operation

logger = logging.getLogger(__name__)


class StatusReporter(Operation):
    """Describes what save and restore would find, without changing anything."""

    def status(self, version: str) -> VersionStatus:
        """Collect the state of one kernel version.

        Args:
            version: Kernel version to inspect.

        Returns:
            VersionStatus snapshot.
        """
        live = self._layout.live_dir(version)
        backup = self._layout.backup_dir(version)
        live_exists = self._inspector.exists(live)
        backup_exists = self._inspector.exists(backup)

        backup_trusted = False
        same_device = False
        if backup_exists:
            uid, gid = self._inspector.principal()
            backup_trusted = self._stat(backup).owned_by(uid, gid)
            if self._inspector.exists(self._layout.modules_root):
                same_device = self._same_device(backup, self._layout.modules_root)

        sentinel = self.settings.config.sentinel
        return VersionStatus(
            version=version,
            live=live,
            backup=backup,
            live_exists=live_exists,
            live_mounted=live_exists and self._inspector.is_mount_point(live),
            backup_exists=backup_exists,
            backup_trusted=backup_trusted,
            same_device=same_device,
            linked=self._inspector.same_file(live / sentinel, backup / sentinel),
        )

    def backups(self) -> list[str]:
        """List the kernel versions that have a backup."""
        root = self._layout.backup_root
        if not self._inspector.exists(root):
            return []

        versions: list[str] = []
        for entry in sorted(root.iterdir()):
            if not entry.is_dir():
                continue
            try:
                versions.append(validate_kernel_version(entry.name))
            except InvalidKernelVersionError:
                logger.debug("Ignoring %s", entry)
        return versions
