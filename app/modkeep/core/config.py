"""Configuration loading and runtime settings.

The configuration file is TOML (default /etc/modkeep.toml) and only needs
to name the values that differ from the defaults:

    backup_root = "/usr/lib/modules-backup"
    modules_root = "/usr/lib/modules"
    package_manager = "auto"
    sentinel = "modules.dep"
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from modkeep.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from modkeep.core.kernel import ModuleLayout
from modkeep.core.paths import (
    CONFIG_ENV_VAR,
    DEFAULT_BACKUP_ROOT,
    DEFAULT_MODULES_ROOT,
    DEFAULT_SENTINEL,
    get_config_path,
)

logger = logging.getLogger(__name__)

PackageManagerChoice = Literal["auto", "pacman", "dpkg"]


class ModkeepConfig(BaseModel):
    """Contents of the modkeep configuration file.

    Attributes:
        backup_root: Directory holding one backup directory per kernel version.
        modules_root: Directory holding the live module directories.
        package_manager: Ownership backend for modclean ("auto" detects it).
        sentinel: File name compared between live and backup trees to
            recognise a hardlinked restore.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    backup_root: Annotated[
        Path,
        Field(description="Directory holding module backups"),
    ] = DEFAULT_BACKUP_ROOT
    modules_root: Annotated[
        Path,
        Field(description="Directory holding live kernel modules"),
    ] = DEFAULT_MODULES_ROOT
    package_manager: Annotated[
        PackageManagerChoice,
        Field(description="Package manager answering ownership queries"),
    ] = "auto"
    sentinel: Annotated[
        str,
        Field(min_length=1, description="Module file used to detect hardlinked restores"),
    ] = DEFAULT_SENTINEL

    @field_validator("backup_root", "modules_root")
    @classmethod
    def validate_absolute(cls, v: Path, info: Any) -> Path:
        """Require absolute root directories."""
        if not v.is_absolute():
            msg = f"{info.field_name} must be an absolute path, got {v}"
            raise ValueError(msg)
        return Path(os.path.normpath(v))

    @field_validator("sentinel")
    @classmethod
    def validate_sentinel(cls, v: str) -> str:
        """Require a bare file name for the sentinel."""
        if "/" in v or v in (".", ".."):
            msg = f"sentinel must be a plain file name, got {v!r}"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_distinct_roots(self) -> "ModkeepConfig":
        """Refuse a backup root that is the modules root itself."""
        if self.backup_root == self.modules_root:
            msg = "backup_root and modules_root must be different directories"
            raise ValueError(msg)
        return self


class Settings(BaseModel):
    """Immutable runtime settings shared by every operation.

    Built once at startup from the configuration file and the global
    command line flags.
    """

    model_config = ConfigDict(frozen=True)

    config: ModkeepConfig = Field(default_factory=ModkeepConfig)
    force: bool = False

    @property
    def layout(self) -> ModuleLayout:
        """Layout of the live and backup module trees."""
        return ModuleLayout(
            modules_root=self.config.modules_root,
            backup_root=self.config.backup_root,
        )


def load_config(path: Path | None = None) -> ModkeepConfig:
    """Load modkeep configuration from a TOML file.

    A missing file at the default location yields the default
    configuration. A missing file that was explicitly requested, either
    as an argument or through MODKEEP_CONFIG, is an error.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ModkeepConfig object.

    Raises:
        ConfigNotFoundError: If an explicitly requested file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    config_path = path or get_config_path()

    if not config_path.exists():
        if explicit:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return ModkeepConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = ModkeepConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s: %s", config_path, config)
    return config


def load_settings(
    path: Path | None = None,
    *,
    force: bool = False,
) -> Settings:
    """Load the configuration file and combine it with command line flags.

    Raises:
        ConfigError: If the configuration cannot be loaded.
    """
    return Settings(config=load_config(path), force=force)
