"""Removal of module directories that may be plain trees or mount points."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from modkeep.core.errors import DeletionError, MountError
from modkeep.filesystem.inspect import PathInspector
from modkeep.filesystem.mounts import MountManager, SystemMountManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single removal.

    Attributes:
        path: Path that was operated on.
        success: Whether the path is gone.
        error: Error message if the removal failed, None otherwise.
    """

    path: Path
    success: bool
    error: str | None = None


class Remover:
    """Deletes a directory completely, whatever it currently is.

    A missing path is already removed. A mount point is unmounted and its
    now empty directory removed. A symlink is unlinked without touching
    its target. Anything else is deleted recursively.
    """

    def __init__(
        self,
        mounts: MountManager | None = None,
        inspector: PathInspector | None = None,
    ) -> None:
        self._mounts = mounts or SystemMountManager()
        self._inspector = inspector or PathInspector()

    def remove(self, path: Path) -> None:
        """Remove path.

        Raises:
            DeletionError: If unmounting or deleting fails.
        """
        if not path.exists() and not path.is_symlink():
            logger.debug("Nothing to remove at %s", path)
            return

        try:
            if path.is_symlink():
                logger.debug("Unlinking symlink %s", path)
                path.unlink()
            elif self._inspector.is_mount_point(path):
                self._mounts.unmount(path)
                logger.debug("Removing mount point %s", path)
                path.rmdir()
            elif path.is_dir():
                logger.debug("Removing tree %s", path)
                shutil.rmtree(path)
            else:
                path.unlink()
        except MountError as e:
            msg = f"Cannot remove {path}: {e}"
            raise DeletionError(msg) from e
        except OSError as e:
            msg = f"Cannot remove {path}: {e}"
            raise DeletionError(msg) from e

        logger.info("Removed %s", path)

    def try_remove(self, path: Path) -> RemovalResult:
        """Remove path, reporting failure instead of raising."""
        try:
            self.remove(path)
        except DeletionError as e:
            logger.warning("%s", e)
            return RemovalResult(path=path, success=False, error=str(e))
        return RemovalResult(path=path, success=True)
