"""Abstract base class for package ownership oracles.

This module defines the interface modclean uses to ask the package
manager whether a module directory still belongs to an installed package.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class PackageOwnershipOracle(ABC):
    """Answers "is this path owned by an installed package?".

    Example:
        >>> oracle = PacmanOracle()
        >>> if oracle.is_available():
        ...     oracle.owns(Path("/usr/lib/modules/6.9.7-arch1-1"))
        True
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the package manager name, e.g. "pacman"."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""

    @abstractmethod
    def owns(self, path: Path) -> bool:
        """Check whether an installed package owns path.

        Args:
            path: Absolute path to query.

        Returns:
            True if a package owns the path, False if none does.

        Raises:
            PackageQueryError: If the package manager cannot answer.
        """
