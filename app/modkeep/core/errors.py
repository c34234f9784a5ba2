"""Exception hierarchy for modkeep.

Every error carries the process exit status the command line reports for
it, so the dispatcher can turn any failure into a distinct exit code.
"""

from pathlib import Path


class ModkeepError(Exception):
    """Base exception for all modkeep failures."""

    exit_code: int = 1


class InvalidKernelVersionError(ModkeepError):
    """Raised when a kernel version cannot be used as a path segment."""

    exit_code = 2


class ConfigError(ModkeepError):
    """Base exception for configuration errors."""

    exit_code = 3


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class MissingSourceError(ModkeepError):
    """Raised when there is no live module directory to back up."""

    exit_code = 61

    def __init__(self, path: Path) -> None:
        super().__init__(f"Nothing to back up: {path} does not exist")
        self.path = path


class BackupExistsError(ModkeepError):
    """Raised when a backup already exists and force was not given."""

    exit_code = 62

    def __init__(self, path: Path) -> None:
        super().__init__(f"Backup already exists: {path} (use --force to replace it)")
        self.path = path


class BackupNotFoundError(ModkeepError):
    """Raised when restoring a version that has no backup."""

    exit_code = 9

    def __init__(self, path: Path) -> None:
        super().__init__(f"No backup found at {path}")
        self.path = path


class DubiousOwnershipError(ModkeepError):
    """Raised when a backup is not owned by the user and group running modkeep."""

    exit_code = 93

    def __init__(self, path: Path, uid: int, gid: int) -> None:
        super().__init__(f"Refusing to restore from {path}: owned by {uid}:{gid}, not by us")
        self.path = path
        self.uid = uid
        self.gid = gid


class AmbiguousMountError(ModkeepError):
    """Raised when the live directory is mounted from something other than its backup."""

    exit_code = 94

    def __init__(self, live: Path, backup: Path) -> None:
        super().__init__(f"{live} is a mount point but is not mounted from {backup}")
        self.live = live
        self.backup = backup


class RestoreBlockedError(ModkeepError):
    """Raised when an unrelated live directory is in the way of a restore."""

    exit_code = 92

    def __init__(self, live: Path) -> None:
        super().__init__(
            f"{live} already exists and is not linked to its backup (use --force to replace it)"
        )
        self.live = live


class ConfirmationRequiredError(ModkeepError):
    """Raised when removing a backup that may be the only copy left."""

    exit_code = 10

    def __init__(self, backup: Path, live: Path, *, mounted: bool = False) -> None:
        state = f"{live} is mounted from it" if mounted else f"{live} does not exist"
        super().__init__(
            f"{backup} may be the only copy of these modules, {state} "
            "(use --force to remove it anyway)"
        )
        self.backup = backup
        self.live = live


class RunningKernelMissingError(ModkeepError):
    """Raised by modclean when the running kernel has no module directory."""

    exit_code = 11

    def __init__(self, live: Path) -> None:
        super().__init__(
            f"Module directory of the running kernel is missing: {live} (use --force to clean anyway)"
        )
        self.live = live


class RunningKernelUnownedError(ModkeepError):
    """Raised by modclean when it would remove the running kernel's modules."""

    exit_code = 12

    def __init__(self, live: Path) -> None:
        super().__init__(
            f"Refusing to remove {live}: it belongs to the running kernel "
            "but no installed package owns it (use --force to remove it)"
        )
        self.live = live


class DeletionError(ModkeepError):
    """Raised when a directory cannot be removed."""


class CopyError(ModkeepError):
    """Raised when copying a module tree fails."""


class MountError(ModkeepError):
    """Raised when a bind mount or unmount fails."""


class PackageQueryError(ModkeepError):
    """Raised when the package manager cannot answer an ownership query."""
