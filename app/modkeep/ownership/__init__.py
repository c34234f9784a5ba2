"""Package ownership oracles.

This module exports the oracle interface, its pacman and dpkg
implementations, and a factory selecting one from configuration.
"""

from modkeep.core.errors import PackageQueryError
from modkeep.ownership.base import PackageOwnershipOracle
from modkeep.ownership.dpkg import DpkgOracle
from modkeep.ownership.pacman import PacmanOracle


def get_oracle(choice: str = "auto") -> PackageOwnershipOracle:
    """Get the ownership oracle for a package manager choice.

    Args:
        choice: "pacman", "dpkg", or "auto" to use the first available one.

    Returns:
        The selected oracle.

    Raises:
        PackageQueryError: If no usable package manager is found.
    """
    oracles: list[PackageOwnershipOracle] = [PacmanOracle(), DpkgOracle()]

    if choice != "auto":
        oracles = [o for o in oracles if o.name == choice]

    for oracle in oracles:
        if oracle.is_available():
            return oracle

    msg = f"No usable package manager found (package_manager = {choice!r})"
    raise PackageQueryError(msg)


__all__ = [
    "DpkgOracle",
    "PackageOwnershipOracle",
    "PacmanOracle",
    "get_oracle",
]
