"""Filesystem primitives for module trees.

This module provides metadata queries, tree copies, bind mounts and
removal of module directories.
"""

from modkeep.filesystem.copier import Copier, CpCopier
from modkeep.filesystem.inspect import PathInfo, PathInspector
from modkeep.filesystem.mounts import MountManager, SystemMountManager
from modkeep.filesystem.remover import RemovalResult, Remover

__all__ = [
    "Copier",
    "CpCopier",
    "MountManager",
    "PathInfo",
    "PathInspector",
    "RemovalResult",
    "Remover",
    "SystemMountManager",
]
