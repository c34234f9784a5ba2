"""Unit tests for kernel version handling and layout."""

from pathlib import Path
from unittest.mock import patch

import pytest
from modkeep.core.errors import InvalidKernelVersionError
from modkeep.core.kernel import ModuleLayout, running_kernel_version, validate_kernel_version


class TestValidateKernelVersion:
    """Tests for validate_kernel_version()."""

    @pytest.mark.parametrize(
        "version",
        ["6.9.7-arch1-1", "5.15.0-91-generic", "6.1.0-18-amd64", "6.6.30_1"],
    )
    def test_valid(self, version: str) -> None:
        """Real kernel release strings are accepted unchanged."""
        assert validate_kernel_version(version) == version

    @pytest.mark.parametrize(
        "version",
        ["", ".", "..", "../etc", "6.1/../../x", "a\0b", "-rf"],
    )
    def test_invalid(self, version: str) -> None:
        """Anything that is not a single safe path segment is rejected."""
        with pytest.raises(InvalidKernelVersionError) as exc_info:
            validate_kernel_version(version)

        assert exc_info.value.exit_code == 2


class TestRunningKernelVersion:
    """Tests for running_kernel_version()."""

    def test_uses_uname(self) -> None:
        """The running version is the uname release."""
        with patch("modkeep.core.kernel.os.uname") as mock_uname:
            mock_uname.return_value.release = "6.9.7-arch1-1"
            assert running_kernel_version() == "6.9.7-arch1-1"


class TestModuleLayout:
    """Tests for ModuleLayout."""

    def test_dirs(self) -> None:
        """Live and backup directories are named by version."""
        layout = ModuleLayout(Path("/usr/lib/modules"), Path("/usr/lib/modules-backup"))

        assert layout.live_dir("6.1") == Path("/usr/lib/modules/6.1")
        assert layout.backup_dir("6.1") == Path("/usr/lib/modules-backup/6.1")

    def test_dirs_validate_version(self) -> None:
        """Path traversal is refused when building directories."""
        layout = ModuleLayout(Path("/usr/lib/modules"), Path("/usr/lib/modules-backup"))

        with pytest.raises(InvalidKernelVersionError):
            layout.backup_dir("..")

    def test_holds_backups(self) -> None:
        """Only the backup root and its parents hold backups."""
        layout = ModuleLayout(Path("/usr/lib/modules"), Path("/usr/lib/modules/.backup"))

        assert layout.holds_backups(Path("/usr/lib/modules/.backup"))
        assert not layout.holds_backups(Path("/usr/lib/modules/6.1"))
