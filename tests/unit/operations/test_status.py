"""Unit tests for StatusReporter."""

import os
from collections.abc import Callable
from pathlib import Path

from modkeep.core.config import Settings
from modkeep.core.kernel import ModuleLayout
from modkeep.operations.restorer import Restorer
from modkeep.operations.status import StatusReporter

from tests.fakes import RUNNING, FakeInspector, FakeMountManager


class TestStatusReporter:
    """Tests for StatusReporter."""

    def test_nothing_saved(
        self,
        settings: Settings,
        inspector: FakeInspector,
        mounts: FakeMountManager,
        layout: ModuleLayout,
        make_modules: Callable[[Path, str], Path],
    ) -> None:
        """Live modules without a backup."""
        make_modules(layout.modules_root, RUNNING)

        status = StatusReporter(settings, inspector=inspector, mounts=mounts).status(RUNNING)

        assert status.live_exists is True
        assert status.live_mounted is False
        assert status.backup_exists is False
        assert status.linked is False

    def test_linked_restore(
        self,
        settings: Settings,
        inspector: FakeInspector,
        mounts: FakeMountManager,
        layout: ModuleLayout,
        make_modules: Callable[[Path, str], Path],
    ) -> None:
        """After a hardlinked restore the status reports the link."""
        make_modules(layout.backup_root, RUNNING)
        Restorer(settings, inspector=inspector, mounts=mounts).restore(RUNNING)

        status = StatusReporter(settings, inspector=inspector, mounts=mounts).status(RUNNING)

        assert status.backup_exists is True
        assert status.backup_trusted is True
        assert status.same_device is True
        assert status.linked is True

    def test_mounted_restore(
        self,
        settings: Settings,
        inspector: FakeInspector,
        mounts: FakeMountManager,
        layout: ModuleLayout,
        make_modules: Callable[[Path, str], Path],
    ) -> None:
        """A bind mounted restore is reported as a mount point on another device."""
        make_modules(layout.backup_root, RUNNING)
        inspector.devices[layout.backup_root] = 4242
        Restorer(settings, inspector=inspector, mounts=mounts).restore(RUNNING)

        status = StatusReporter(settings, inspector=inspector, mounts=mounts).status(RUNNING)

        assert status.live_mounted is True
        assert status.same_device is False

    def test_untrusted_backup(
        self,
        settings: Settings,
        mounts: FakeMountManager,
        layout: ModuleLayout,
        make_modules: Callable[[Path, str], Path],
    ) -> None:
        """A backup owned by someone else is reported, not rejected."""
        make_modules(layout.backup_root, RUNNING)
        inspector = FakeInspector(mounts, principal=(os.geteuid() + 1, os.getegid()))

        status = StatusReporter(settings, inspector=inspector, mounts=mounts).status(RUNNING)

        assert status.backup_trusted is False

    def test_lists_backups(
        self,
        settings: Settings,
        inspector: FakeInspector,
        mounts: FakeMountManager,
        layout: ModuleLayout,
        make_modules: Callable[[Path, str], Path],
    ) -> None:
        """Backups are listed by version, ignoring plain files."""
        make_modules(layout.backup_root, "6.1.0-2")
        make_modules(layout.backup_root, "5.10.0-1")
        (layout.backup_root / "notes.txt").write_text("x")

        reporter = StatusReporter(settings, inspector=inspector, mounts=mounts)

        assert reporter.backups() == ["5.10.0-1", "6.1.0-2"]

    def test_no_backup_root(
        self,
        settings: Settings,
        inspector: FakeInspector,
        mounts: FakeMountManager,
    ) -> None:
        """A missing backup root means no backups."""
        assert StatusReporter(settings, inspector=inspector, mounts=mounts).backups() == []
