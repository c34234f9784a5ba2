"""Kernel version handling and module tree layout."""

import os
from dataclasses import dataclass
from pathlib import Path

from modkeep.core.errors import InvalidKernelVersionError


def validate_kernel_version(version: str) -> str:
    """Check that a kernel version is safe to use as a single path segment.

    Args:
        version: Kernel release string, e.g. "6.9.7-arch1-1".

    Returns:
        The version, unchanged.

    Raises:
        InvalidKernelVersionError: If the version is empty, contains a path
            separator or NUL byte, is "." or "..", or starts with "-".
    """
    if not version:
        raise InvalidKernelVersionError("Kernel version cannot be empty")
    if version in (".", "..") or "/" in version or "\0" in version:
        raise InvalidKernelVersionError(f"Invalid kernel version: {version!r}")
    if version.startswith("-"):
        raise InvalidKernelVersionError(f"Kernel version cannot start with '-': {version!r}")
    return version


def running_kernel_version() -> str:
    """Return the release string of the running kernel (``uname -r``)."""
    return os.uname().release


@dataclass(frozen=True, slots=True)
class ModuleLayout:
    """Where live module directories and their backups live.

    Attributes:
        modules_root: Parent of the live module directories.
        backup_root: Parent of the backup directories.
    """

    modules_root: Path
    backup_root: Path

    def live_dir(self, version: str) -> Path:
        """Live module directory of a kernel version."""
        return self.modules_root / validate_kernel_version(version)

    def backup_dir(self, version: str) -> Path:
        """Backup directory of a kernel version."""
        return self.backup_root / validate_kernel_version(version)

    def holds_backups(self, path: Path) -> bool:
        """Check whether a path is the backup root or one of its parents."""
        return path == self.backup_root or path in self.backup_root.parents
