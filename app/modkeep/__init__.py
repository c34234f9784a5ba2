"""modkeep - keep the running kernel's modules across package upgrades."""

__version__ = "0.3.0"
