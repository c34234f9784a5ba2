"""Shared plumbing for modkeep operations.

Every operation works on the same settings and the same set of
filesystem primitives. Tests replace the primitives with fakes.
"""

import logging
from pathlib import Path

from modkeep.core.config import Settings
from modkeep.core.errors import ModkeepError
from modkeep.filesystem.copier import Copier, CpCopier
from modkeep.filesystem.inspect import PathInfo, PathInspector
from modkeep.filesystem.mounts import MountManager, SystemMountManager
from modkeep.filesystem.remover import Remover

logger = logging.getLogger(__name__)


class Operation:
    """Base class holding settings and filesystem primitives.

    Attributes:
        settings: Runtime settings, including the force flag.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        inspector: PathInspector | None = None,
        mounts: MountManager | None = None,
        copier: Copier | None = None,
    ) -> None:
        self.settings = settings
        self._layout = settings.layout
        self._inspector = inspector or PathInspector()
        self._mounts = mounts or SystemMountManager()
        self._copier = copier or CpCopier()
        self._remover = Remover(self._mounts, self._inspector)

    @property
    def force(self) -> bool:
        """Check if the operation runs with --force."""
        return self.settings.force

    def _stat(self, path: Path) -> PathInfo:
        """Stat path, turning OS errors into modkeep errors."""
        try:
            return self._inspector.stat(path)
        except OSError as e:
            msg = f"Cannot stat {path}: {e}"
            raise ModkeepError(msg) from e

    def _same_device(self, first: Path, second: Path) -> bool:
        """Check whether two paths live on the same device."""
        same = self._stat(first).device == self._stat(second).device
        logger.debug("%s and %s on the same device: %s", first, second, same)
        return same

    def _mounted_from(self, live: Path, backup: Path) -> bool:
        """Check whether live is a bind mount of backup.

        The backup is then the only copy of the modules seen at live.
        """
        if not self._inspector.is_mount_point(live):
            return False
        mounted = self._stat(live).same_entry(self._stat(backup))
        logger.debug("%s mounted from %s: %s", live, backup, mounted)
        return mounted

    def _ensure_dir(self, path: Path, error: type[ModkeepError]) -> None:
        """Create a directory and its parents if missing."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create directory {path}: {e}"
            raise error(msg) from e
