"""Command dispatch for modkeep.

Maps each verb to exactly one operation and turns its outcome, or the
error it raised, into a message and a process exit status.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from modkeep.cli.display import print_clean_report, print_status
from modkeep.core.config import Settings
from modkeep.core.errors import ModkeepError
from modkeep.core.kernel import running_kernel_version, validate_kernel_version
from modkeep.filesystem.copier import Copier
from modkeep.filesystem.inspect import PathInspector
from modkeep.filesystem.mounts import MountManager
from modkeep.models.outcome import RestoreOutcome, SaveOutcome
from modkeep.operations import BackupCleaner, OrphanCleaner, Restorer, Saver, StatusReporter
from modkeep.operations.base import Operation
from modkeep.ownership import PackageOwnershipOracle
from modkeep.utils.formatting import print_error, print_info, print_success

logger = logging.getLogger(__name__)

OperationT = TypeVar("OperationT", bound=Operation)

# Reported when restore finds the live directory already hardlinked from its backup
ALREADY_LINKED_EXIT = 91


class Verb(str, Enum):
    """Commands modkeep understands."""

    SAVE = "save"
    RESTORE = "restore"
    BAKCLEAN = "bakclean"
    MODCLEAN = "modclean"
    STATUS = "status"


# Verbs invoked by the package manager hook only ever act on the running kernel
HOOK_VERBS = frozenset({Verb.SAVE, Verb.RESTORE})


class Dispatcher:
    """Runs one verb against the configured module trees.

    Args:
        settings: Runtime settings built at startup.
        running_version: Running kernel version. Defaults to ``uname -r``.
        inspector: Metadata queries (tests pass fakes).
        mounts: Mount operations (tests pass fakes).
        copier: Tree copier (tests pass fakes).
        oracle: Package ownership oracle for modclean. Defaults to the one
            selected by the configuration.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        running_version: str | None = None,
        inspector: PathInspector | None = None,
        mounts: MountManager | None = None,
        copier: Copier | None = None,
        oracle: PackageOwnershipOracle | None = None,
    ) -> None:
        self._settings = settings
        self._running_version = running_version
        self._inspector = inspector
        self._mounts = mounts
        self._copier = copier
        self._oracle = oracle
        self._handlers: dict[Verb, Callable[[str], int]] = {
            Verb.SAVE: self._save,
            Verb.RESTORE: self._restore,
            Verb.BAKCLEAN: self._bakclean,
            Verb.MODCLEAN: self._modclean,
            Verb.STATUS: self._status,
        }

    @property
    def running_version(self) -> str:
        """Version of the running kernel."""
        if self._running_version is None:
            self._running_version = running_kernel_version()
        return self._running_version

    def run(self, verb: Verb, version: str | None = None) -> int:
        """Run a verb and return the process exit status.

        Errors are printed to stderr and converted to their exit status;
        nothing is retried.

        Args:
            verb: Command to run.
            version: Kernel version, defaults to the running kernel.

        Returns:
            Exit status, 0 on success.
        """
        handler = self._handlers[verb]
        try:
            target = self._resolve_version(verb, version)
            if target is None:
                return 0
            logger.debug("Running %s for %s (force=%s)", verb.value, target, self._settings.force)
            return handler(target)
        except ModkeepError as e:
            logger.debug("%s failed", verb.value, exc_info=True)
            print_error(str(e))
            return e.exit_code

    def _resolve_version(self, verb: Verb, version: str | None) -> str | None:
        """Pick the version a verb acts on, or None when there is nothing to do."""
        if version is None:
            return self.running_version

        validate_kernel_version(version)
        if verb in HOOK_VERBS and version != self.running_version:
            print_info(
                f"{version} is not the running kernel ({self.running_version}), nothing to do."
            )
            return None
        return version

    def _operation(self, cls: type[OperationT]) -> OperationT:
        return cls(
            self._settings,
            inspector=self._inspector,
            mounts=self._mounts,
            copier=self._copier,
        )

    def _save(self, version: str) -> int:
        outcome = self._operation(Saver).save(version)
        if outcome is SaveOutcome.ALREADY_MOUNTED:
            print_info(f"Modules of {version} are mounted from the backup, nothing to save.")
        else:
            print_success(f"Saved modules of {version} ({outcome.value}).")
        return 0

    def _restore(self, version: str) -> int:
        outcome = self._operation(Restorer).restore(version)
        if outcome.changed:
            print_success(f"Restored modules of {version} ({outcome.value}).")
            return 0
        if outcome is RestoreOutcome.ALREADY_LINKED:
            print_info(f"Modules of {version} are already linked from the backup.")
            return ALREADY_LINKED_EXIT
        print_info(f"Modules of {version} are already mounted from the backup.")
        return 0

    def _bakclean(self, version: str) -> int:
        removed = self._operation(BackupCleaner).clean(version)
        if removed:
            print_success(f"Removed backup of {version}.")
        else:
            print_info(f"No backup of {version} to remove.")
        return 0

    def _modclean(self, version: str) -> int:
        cleaner = OrphanCleaner(
            self._settings,
            oracle=self._oracle,
            running_version=version,
            inspector=self._inspector,
            mounts=self._mounts,
            copier=self._copier,
        )
        report = cleaner.clean()
        print_clean_report(report)
        return report.exit_code

    def _status(self, version: str) -> int:
        reporter = self._operation(StatusReporter)
        print_status(reporter.status(version), reporter.backups(), self.running_version)
        return 0
