"""modkeep operations.

This module exports one class per command: save, restore, bakclean,
modclean and status.
"""

from modkeep.operations.backup_cleaner import BackupCleaner
from modkeep.operations.orphan_cleaner import OrphanCleaner
from modkeep.operations.restorer import Restorer
from modkeep.operations.saver import Saver
from modkeep.operations.status import StatusReporter

__all__ = [
    "BackupCleaner",
    "OrphanCleaner",
    "Restorer",
    "Saver",
    "StatusReporter",
]
