"""pacman ownership oracle.

Queries ``pacman -Qoq <path>``, which exits 0 with the owning package
names, or exits 1 with "No package owns" on stderr.
"""

import logging
from pathlib import Path

from modkeep.core.errors import PackageQueryError
from modkeep.ownership.base import PackageOwnershipOracle
from modkeep.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class PacmanOracle(PackageOwnershipOracle):
    """Ownership oracle for pacman based systems."""

    _NOT_OWNED_MARKER = "No package owns"

    @property
    def name(self) -> str:
        """Return "pacman"."""
        return "pacman"

    def is_available(self) -> bool:
        """Check if pacman is available."""
        return command_exists("pacman")

    def owns(self, path: Path) -> bool:
        """Ask pacman whether it owns path."""
        try:
            result = run_command(["pacman", "-Qoq", str(path)], timeout=30.0)
        except OSError as e:
            msg = f"Cannot run pacman: {e}"
            raise PackageQueryError(msg) from e

        if result.success:
            logger.debug("%s is owned by %s", path, result.stdout.strip())
            return True

        if result.returncode == 1 and self._NOT_OWNED_MARKER in result.stderr:
            logger.debug("No package owns %s", path)
            return False

        msg = f"pacman could not query {path}: {result.error_text}"
        raise PackageQueryError(msg)
