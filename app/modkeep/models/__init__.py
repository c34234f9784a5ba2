"""Data models for modkeep.

This module exports the outcome types returned by operations.
"""

from modkeep.models.outcome import OrphanCleanReport, RestoreOutcome, SaveOutcome, VersionStatus

__all__ = [
    "OrphanCleanReport",
    "RestoreOutcome",
    "SaveOutcome",
    "VersionStatus",
]
