"""Default locations used by modkeep.

All of these can be overridden through the configuration file, whose own
location can be overridden with the MODKEEP_CONFIG environment variable.
"""

import os
from pathlib import Path

# Application identifier for file naming
APP_NAME = "modkeep"

DEFAULT_MODULES_ROOT = Path("/usr/lib/modules")
DEFAULT_BACKUP_ROOT = Path("/usr/lib/modules-backup")
DEFAULT_CONFIG_PATH = Path("/etc") / f"{APP_NAME}.toml"

# Module file compared between live and backup trees to detect hardlinked restores
DEFAULT_SENTINEL = "modules.dep"

CONFIG_ENV_VAR = "MODKEEP_CONFIG"


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path from MODKEEP_CONFIG if set, otherwise /etc/modkeep.toml.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_CONFIG_PATH
