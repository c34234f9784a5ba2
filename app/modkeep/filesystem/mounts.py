"""Bind mount management."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from modkeep.core.errors import MountError
from modkeep.utils.shell import run_command

logger = logging.getLogger(__name__)


class MountManager(ABC):
    """Abstract mount operations used by restore and removal."""

    @abstractmethod
    def bind(self, source: Path, target: Path) -> None:
        """Bind mount source onto the existing directory target.

        Raises:
            MountError: If the mount fails.
        """

    @abstractmethod
    def unmount(self, target: Path) -> None:
        """Unmount whatever is mounted on target.

        Raises:
            MountError: If the unmount fails.
        """


class SystemMountManager(MountManager):
    """MountManager backed by mount(8) and umount(8)."""

    def bind(self, source: Path, target: Path) -> None:
        """Bind mount with ``mount --bind``."""
        logger.info("Bind mounting %s on %s", source, target)
        self._run(["mount", "--bind", str(source), str(target)], f"mount {source} on {target}")

    def unmount(self, target: Path) -> None:
        """Unmount with ``umount``."""
        logger.info("Unmounting %s", target)
        self._run(["umount", str(target)], f"unmount {target}")

    def _run(self, args: list[str], what: str) -> None:
        try:
            result = run_command(args, timeout=None)
        except OSError as e:
            msg = f"Cannot {what}: {e}"
            raise MountError(msg) from e
        if not result.success:
            msg = f"Cannot {what}: {result.error_text}"
            raise MountError(msg)
