"""Structured filesystem metadata queries.

Device, inode and owner identifiers come straight from ``os.stat`` so the
decisions built on them never depend on parsing tool output. Mount points
are also looked up in the kernel mount table, which is the only place a
bind mount within one filesystem shows up.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Mount table of this process; lists bind mounts that os.path.ismount cannot see
MOUNTINFO_PATH = Path("/proc/self/mountinfo")

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def parse_mount_points(mountinfo: str) -> set[str]:
    """Collect the mount points listed in a mountinfo table.

    The fifth field of each line is the mount point, with space, tab,
    newline and backslash written as octal escapes.
    """
    points: set[str] = set()
    for line in mountinfo.splitlines():
        fields = line.split(" ")
        if len(fields) > 4:
            points.add(_OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), fields[4]))
    return points


@dataclass(frozen=True, slots=True)
class PathInfo:
    """Snapshot of the stat fields modkeep decides on.

    Attributes:
        device: Device id of the filesystem holding the entry.
        inode: Inode number on that device.
        uid: Owning user id.
        gid: Owning group id.
    """

    device: int
    inode: int
    uid: int
    gid: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "PathInfo":
        """Build a PathInfo from an ``os.stat`` result."""
        return cls(device=st.st_dev, inode=st.st_ino, uid=st.st_uid, gid=st.st_gid)

    def same_entry(self, other: "PathInfo") -> bool:
        """Check whether both snapshots describe the same directory entry."""
        return self.device == other.device and self.inode == other.inode

    def owned_by(self, uid: int, gid: int) -> bool:
        """Check ownership against a user and group id."""
        return self.uid == uid and self.gid == gid


class PathInspector:
    """Reads metadata of module trees without modifying them.

    Args:
        mountinfo: Mount table consulted for mount points.
    """

    def __init__(self, mountinfo: Path = MOUNTINFO_PATH) -> None:
        self._mountinfo = mountinfo

    def exists(self, path: Path) -> bool:
        """Check whether a directory exists at path (symlinks are followed)."""
        return path.is_dir()

    def stat(self, path: Path) -> PathInfo:
        """Return stat metadata for path.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        return PathInfo.from_stat(os.stat(path))

    def is_mount_point(self, path: Path) -> bool:
        """Check whether path is a mount point, bind mounts included.

        Falls back to ``os.path.ismount`` alone when the mount table
        cannot be read.
        """
        if os.path.ismount(path):
            return True
        try:
            table = self._mountinfo.read_text()
        except OSError as e:
            logger.warning("Cannot read %s: %s", self._mountinfo, e)
            return False
        return os.path.realpath(path) in parse_mount_points(table)

    def same_file(self, first: Path, second: Path) -> bool:
        """Check whether two paths name the same file.

        Returns False when either path is missing.
        """
        try:
            return os.path.samefile(first, second)
        except OSError:
            return False

    def principal(self) -> tuple[int, int]:
        """Return the effective user and group id of this process."""
        return os.geteuid(), os.getegid()
