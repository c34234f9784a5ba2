"""Garbage collection of module directories no package owns.

After upgrades the modules root can collect directories of kernels that
are no longer installed, including restored copies of the kernel that
was running at upgrade time. modclean removes every directory that the
package manager does not own, except the running kernel's.
"""

import logging
from pathlib import Path

from modkeep.core.config import Settings
from modkeep.core.errors import ModkeepError, RunningKernelMissingError, RunningKernelUnownedError
from modkeep.core.kernel import running_kernel_version
from modkeep.filesystem.copier import Copier
from modkeep.filesystem.inspect import PathInspector
from modkeep.filesystem.mounts import MountManager
from modkeep.models.outcome import OrphanCleanReport
from modkeep.operations.base import Operation
from modkeep.ownership import PackageOwnershipOracle, get_oracle

logger = logging.getLogger(__name__)


class OrphanCleaner(Operation):
    """Removes module directories not tracked by the package manager.

    Unlike the other operations, a failed removal does not stop the run:
    failures are collected in the report and the next directory is
    processed. Removing the running kernel's directory is the one fatal
    case.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        oracle: PackageOwnershipOracle | None = None,
        running_version: str | None = None,
        inspector: PathInspector | None = None,
        mounts: MountManager | None = None,
        copier: Copier | None = None,
    ) -> None:
        super().__init__(settings, inspector=inspector, mounts=mounts, copier=copier)
        self._oracle = oracle
        self._running_version = running_version

    def clean(self) -> OrphanCleanReport:
        """Remove every unowned module directory.

        Returns:
            Report of kept directories and removal results.

        Raises:
            RunningKernelMissingError: If the running kernel has no module
                directory and force is not set.
            RunningKernelUnownedError: If the running kernel's directory is
                unowned and force is not set. Directories handled before it
                stay removed.
            PackageQueryError: If the package manager cannot answer.
        """
        running = self._running_version or running_kernel_version()
        running_live = self._layout.live_dir(running)

        if not self._inspector.exists(running_live) and not self.force:
            raise RunningKernelMissingError(running_live)

        oracle = self._oracle or get_oracle(self.settings.config.package_manager)
        logger.debug("Using %s for ownership queries", oracle.name)

        report = OrphanCleanReport()
        for entry in self._module_dirs():
            if oracle.owns(entry):
                logger.debug("Keeping %s (owned)", entry)
                report.kept.append(entry)
                continue

            if entry.name == running and not self.force:
                raise RunningKernelUnownedError(entry)

            report.results.append(self._remover.try_remove(entry))

        if report.failures:
            logger.warning("%d module directories could not be removed", len(report.failures))
        return report

    def _module_dirs(self) -> list[Path]:
        """List the immediate subdirectories of the modules root."""
        root = self._layout.modules_root
        try:
            entries = sorted(root.iterdir())
        except FileNotFoundError:
            logger.warning("Modules root %s does not exist", root)
            return []
        except OSError as e:
            msg = f"Cannot list {root}: {e}"
            raise ModkeepError(msg) from e

        return [e for e in entries if e.is_dir() and not self._layout.holds_backups(e)]
