"""dpkg ownership oracle.

Queries ``dpkg -S <path>``, which exits 0 when a package owns the path,
1 when no package matches and 2 on errors.
"""

import logging
from pathlib import Path

from modkeep.core.errors import PackageQueryError
from modkeep.ownership.base import PackageOwnershipOracle
from modkeep.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class DpkgOracle(PackageOwnershipOracle):
    """Ownership oracle for dpkg based systems."""

    @property
    def name(self) -> str:
        """Return "dpkg"."""
        return "dpkg"

    def is_available(self) -> bool:
        """Check if dpkg is available."""
        return command_exists("dpkg")

    def owns(self, path: Path) -> bool:
        """Ask dpkg whether a package ships path."""
        try:
            result = run_command(["dpkg", "-S", str(path)], timeout=30.0)
        except OSError as e:
            msg = f"Cannot run dpkg: {e}"
            raise PackageQueryError(msg) from e

        if result.success:
            logger.debug("%s is owned by %s", path, result.stdout.split(":", 1)[0])
            return True

        # dpkg reports "no path found matching pattern" with exit status 1
        if result.returncode == 1:
            logger.debug("No package owns %s", path)
            return False

        msg = f"dpkg could not query {path}: {result.error_text}"
        raise PackageQueryError(msg)
