"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

from modkeep.utils.shell import CommandResult, command_exists, run_command


class TestRunCommand:
    """Tests for run_command function."""

    @patch("modkeep.utils.shell.subprocess.run")
    def test_returns_result(self, mock_run: MagicMock) -> None:
        """run_command wraps the subprocess result."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)

        result = run_command(["cp", "-a", "a", "b"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=3)
        assert result.success is False

    @patch("modkeep.utils.shell.subprocess.run")
    def test_captures_text_output(self, mock_run: MagicMock) -> None:
        """Output is captured as text with the given timeout."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["umount", "/mnt"], timeout=None)

        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["timeout"] is None


class TestCommandResult:
    """Tests for CommandResult."""

    def test_error_text_prefers_stderr(self) -> None:
        """stderr is the preferred failure description."""
        assert CommandResult("out", " err \n", 1).error_text == "err"

    def test_error_text_falls_back(self) -> None:
        """Without output the exit status is described."""
        assert CommandResult("", "", 32).error_text == "exit status 32"


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("modkeep.utils.shell.shutil.which", return_value="/usr/bin/mount")
    def test_found(self, _mock_which: MagicMock) -> None:
        """An executable on PATH exists."""
        assert command_exists("mount") is True

    @patch("modkeep.utils.shell.shutil.which", return_value=None)
    def test_missing(self, _mock_which: MagicMock) -> None:
        """A missing executable does not."""
        assert command_exists("pacman") is False
