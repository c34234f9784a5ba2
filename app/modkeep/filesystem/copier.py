"""Metadata-preserving copies of module trees.

Copies keep ownership, modes, timestamps and symlinks. When source and
destination share a device, files are hardlinked instead of duplicated.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from modkeep.core.errors import CopyError
from modkeep.utils.shell import run_command

logger = logging.getLogger(__name__)


class Copier(ABC):
    """Abstract tree copier."""

    @abstractmethod
    def copy_tree(self, source: Path, destination: Path, *, hardlink: bool) -> None:
        """Copy the directory source to destination.

        The destination must not exist yet; its parent must.

        Args:
            source: Directory to copy.
            destination: Path of the new directory.
            hardlink: Hardlink regular files instead of copying their data.

        Raises:
            CopyError: If the copy fails.
        """


class CpCopier(Copier):
    """Copier backed by ``cp -a`` (``cp -al`` for hardlinked copies)."""

    def copy_tree(self, source: Path, destination: Path, *, hardlink: bool) -> None:
        """Copy a tree with cp, preserving all metadata."""
        flags = "-al" if hardlink else "-a"
        logger.info(
            "Copying %s to %s (%s)",
            source,
            destination,
            "hardlinks" if hardlink else "full copy",
        )
        try:
            result = run_command(
                ["cp", flags, "--", str(source), str(destination)],
                timeout=None,
            )
        except OSError as e:
            msg = f"Cannot run cp: {e}"
            raise CopyError(msg) from e

        if not result.success:
            msg = f"Failed to copy {source} to {destination}: {result.error_text}"
            raise CopyError(msg)
