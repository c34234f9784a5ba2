"""Unit tests for default path management."""

import os
from pathlib import Path
from unittest.mock import patch

from modkeep.core.paths import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, get_config_path


class TestGetConfigPath:
    """Tests for get_config_path function."""

    def test_default_config_path(self) -> None:
        """get_config_path returns /etc/modkeep.toml when MODKEEP_CONFIG is not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_path()

        assert result == DEFAULT_CONFIG_PATH
        assert result == Path("/etc/modkeep.toml")

    def test_respects_env_override(self, tmp_path: Path) -> None:
        """get_config_path respects the MODKEEP_CONFIG environment variable."""
        override = tmp_path / "custom.toml"
        with patch.dict(os.environ, {CONFIG_ENV_VAR: str(override)}):
            result = get_config_path()

        assert result == override

    def test_empty_override_ignored(self) -> None:
        """An empty MODKEEP_CONFIG falls back to the default."""
        with patch.dict(os.environ, {CONFIG_ENV_VAR: ""}):
            result = get_config_path()

        assert result == DEFAULT_CONFIG_PATH
