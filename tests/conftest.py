"""Shared fixtures: an offscreen QApplication and per-test INI settings."""

from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from lifecycleview.config.settings import PreferenceStore
from lifecycleview.i18n.catalog import TranslationCatalog
from lifecycleview.i18n.translator import Translator


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "prefs.ini"


@pytest.fixture
def qsettings(settings_path: Path) -> QSettings:
    return QSettings(str(settings_path), QSettings.Format.IniFormat)


@pytest.fixture
def store(qsettings: QSettings) -> PreferenceStore:
    return PreferenceStore(qsettings)


@pytest.fixture
def reopen_store(settings_path: Path):
    """Open a fresh store over the same file, as after an application restart."""

    def _reopen() -> PreferenceStore:
        return PreferenceStore(QSettings(str(settings_path), QSettings.Format.IniFormat))

    return _reopen


@pytest.fixture
def translator(tmp_path: Path) -> Translator:
    root = tmp_path / "locales"
    root.mkdir()
    (root / "fr-FR.yml").write_text(
        "React lifecycle methods diagram: Diagramme des méthodes du cycle de vie React\n"
        "Mounting: Montage\n"
        "Dark theme: Thème sombre\n",
        encoding="utf-8",
    )
    return Translator(TranslationCatalog(root))
