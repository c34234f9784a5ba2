"""Unit tests for DpkgOracle."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from modkeep.core.errors import PackageQueryError
from modkeep.ownership.dpkg import DpkgOracle
from modkeep.utils.shell import CommandResult

MODULES = Path("/lib/modules/6.1.0-18-amd64")


class TestDpkgOracle:
    """Tests for DpkgOracle."""

    @patch("modkeep.ownership.dpkg.run_command")
    def test_owned(self, mock_run: MagicMock) -> None:
        """dpkg -S success means a package ships the path."""
        mock_run.return_value = CommandResult(
            stdout=f"linux-image-6.1.0-18-amd64: {MODULES}\n",
            stderr="",
            returncode=0,
        )

        assert DpkgOracle().owns(MODULES) is True
        assert mock_run.call_args.args[0] == ["dpkg", "-S", str(MODULES)]

    @patch("modkeep.ownership.dpkg.run_command")
    def test_not_owned(self, mock_run: MagicMock) -> None:
        """Exit status 1 means no package matches."""
        mock_run.return_value = CommandResult(
            stdout="",
            stderr=f"dpkg-query: no path found matching pattern {MODULES}\n",
            returncode=1,
        )

        assert DpkgOracle().owns(MODULES) is False

    @patch("modkeep.ownership.dpkg.run_command")
    def test_error(self, mock_run: MagicMock) -> None:
        """Exit status 2 is an error."""
        mock_run.return_value = CommandResult(
            stdout="",
            stderr="dpkg-query: error: database is locked\n",
            returncode=2,
        )

        with pytest.raises(PackageQueryError, match="database is locked"):
            DpkgOracle().owns(MODULES)
