"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from modkeep.core.config import ModkeepConfig, Settings
from modkeep.core.kernel import ModuleLayout

from tests.fakes import FakeInspector, FakeMountManager


@pytest.fixture
def layout(tmp_path: Path) -> ModuleLayout:
    """Modules root (created) and backup root (not yet created) under tmp_path."""
    modules_root = tmp_path / "lib" / "modules"
    modules_root.mkdir(parents=True)
    return ModuleLayout(modules_root=modules_root, backup_root=tmp_path / "backup")


@pytest.fixture
def settings(layout: ModuleLayout) -> Settings:
    """Settings pointing at the temporary layout."""
    return Settings(
        config=ModkeepConfig(
            modules_root=layout.modules_root,
            backup_root=layout.backup_root,
        )
    )


@pytest.fixture
def forced(settings: Settings) -> Settings:
    """Settings with --force."""
    return settings.model_copy(update={"force": True})


@pytest.fixture
def mounts() -> FakeMountManager:
    """Fake mount manager."""
    return FakeMountManager()


@pytest.fixture
def inspector(mounts: FakeMountManager) -> FakeInspector:
    """Fake inspector bound to the fake mount manager."""
    return FakeInspector(mounts)


@pytest.fixture
def make_modules() -> Callable[[Path, str], Path]:
    """Factory creating a small module tree <root>/<version>."""

    def _make(root: Path, version: str) -> Path:
        tree = root / version
        (tree / "kernel" / "drivers").mkdir(parents=True)
        (tree / "modules.dep").write_text("kernel/drivers/e1000e.ko.zst:\n")
        (tree / "modules.alias").write_text("alias pci:v00008086d* e1000e\n")
        (tree / "kernel" / "drivers" / "e1000e.ko.zst").write_bytes(b"\x28\xb5\x2f\xfd" * 64)
        (tree / "build").symlink_to(f"/usr/src/linux-{version}")
        return tree

    return _make
