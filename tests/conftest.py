"""Shared fixtures for pico8-launcher tests."""

import stat
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
from PySide6.QtCore import QSettings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Store QSettings in a temporary INI directory instead of the user profile."""
    settings_dir = tmp_path_factory.mktemp("settings")
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    QSettings.setPath(
        QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(settings_dir)
    )
    yield settings_dir


@pytest.fixture
def fake_console(tmp_path: Path) -> Callable[[str], Path]:
    """Create an executable shell script standing in for PICO-8."""
    if sys.platform == "win32":
        pytest.skip("fake console scripts need a POSIX shell")

    def make(body: str) -> Path:
        script = tmp_path / "pico8"
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove launcher environment variables inherited from the shell."""
    for name in ("PICO8_EXE_PATH", "ENTRY_FILE_PATH", "ENTRY_CART_PATH", "PICO8_ARGS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
