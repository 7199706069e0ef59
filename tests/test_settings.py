"""Tests for the persistent preference store and app settings."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QSettings

from lifecycleview.config.settings import AppSettings, PreferenceStore
from lifecycleview.core.preferences import decode_bool


def _failing_backend(**overrides) -> MagicMock:
    backend = MagicMock()
    backend.contains.return_value = False
    backend.status.return_value = QSettings.Status.NoError
    for name, value in overrides.items():
        setattr(backend, name, value)
    return backend


class TestPreferenceStore:
    @pytest.mark.parametrize("key", ["showAdvanced", "locale", "reactVersion", "unknown/key"])
    def test_missing_key_returns_default(self, store, key):
        assert store.get(key, "fallback") == "fallback"
        assert store.get(key) is None

    def test_get_does_not_write(self, store, qsettings):
        store.get("locale", "en-US")
        assert qsettings.contains("locale") is False
        assert qsettings.allKeys() == []

    def test_set_then_get_same_tick(self, store):
        assert store.set("locale", "fr-FR") is True
        assert store.get("locale", "en-US") == "fr-FR"

    def test_stored_falsy_value_is_not_treated_as_missing(self, store, reopen_store):
        store.set("showAdvanced", False)
        store.set("locale", "")
        reopened = reopen_store()
        assert reopened.contains("showAdvanced")
        assert decode_bool(reopened.get("showAdvanced", "default")) is False
        assert reopened.get("locale", "en-US") == ""

    def test_set_persists_across_instances(self, store, reopen_store):
        store.set("reactVersion", "16.3")
        assert reopen_store().get("reactVersion", "16.4") == "16.3"

    def test_write_exception_is_logged_not_raised(self, caplog):
        backend = _failing_backend()
        backend.setValue.side_effect = OSError("No space left on device")
        store = PreferenceStore(backend)
        with caplog.at_level(logging.WARNING, logger="lifecycleview.settings"):
            assert store.set("locale", "fr-FR") is False
        assert "STORAGE_WRITE_FAILED" in caplog.text

    def test_permission_error_classified_as_unavailable(self, caplog):
        backend = _failing_backend()
        backend.sync.side_effect = PermissionError("Permission denied")
        store = PreferenceStore(backend)
        with caplog.at_level(logging.WARNING, logger="lifecycleview.settings"):
            assert store.set("locale", "fr-FR") is False
        assert "STORAGE_UNAVAILABLE" in caplog.text

    def test_status_error_after_sync_is_reported(self, caplog):
        backend = _failing_backend()
        backend.status.return_value = QSettings.Status.AccessError
        store = PreferenceStore(backend)
        with caplog.at_level(logging.WARNING, logger="lifecycleview.settings"):
            assert store.set("showAdvanced", True) is False
        assert "STORAGE_UNAVAILABLE" in caplog.text


class TestAppSettings:
    def test_data_dir_override(self, tmp_path: Path, monkeypatch, qsettings):
        monkeypatch.setenv("LIFECYCLEVIEW_DATA_DIR", str(tmp_path / "data"))
        settings = AppSettings(qsettings)
        assert settings.app_data_dir == tmp_path / "data"
        assert settings.log_dir.exists()
        assert settings.user_theme_path == tmp_path / "data" / "theme.json"

    def test_settings_file_env_selects_ini_backend(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "from-env.ini"
        monkeypatch.setenv("LIFECYCLEVIEW_SETTINGS_FILE", str(path))
        settings = AppSettings()
        settings.store.set("locale", "de-DE")
        assert Path(settings.settings_location) == path
        assert path.exists()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nonsense", logging.INFO), ("", logging.INFO)],
    )
    def test_log_level_from_env(self, monkeypatch, qsettings, raw, expected):
        monkeypatch.setenv("LIFECYCLEVIEW_LOG_LEVEL", raw)
        assert AppSettings(qsettings).log_level == expected

    def test_store_wraps_given_backend(self, qsettings):
        settings = AppSettings(qsettings)
        settings.store.set("reactVersion", "16.4")
        assert qsettings.value("reactVersion") == "16.4"
