"""Application settings and the persistent preference store via QSettings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from PySide6.QtCore import QSettings

from lifecycleview.errors import ErrorCode, LifecycleViewError, classify_exception

logger = logging.getLogger("lifecycleview.settings")

ORGANIZATION_NAME = "LifecycleView"
APPLICATION_NAME = "LifecycleView"

SETTINGS_FILE_ENV = "LIFECYCLEVIEW_SETTINGS_FILE"
DATA_DIR_ENV = "LIFECYCLEVIEW_DATA_DIR"
LOG_LEVEL_ENV = "LIFECYCLEVIEW_LOG_LEVEL"

THEME_FILE_NAME = "theme.json"


class PreferenceStore:
    """Key/value access to persisted preferences with fallback defaults.

    Every read and write of a preference key goes through this class; nothing
    else talks to the QSettings backend for those keys. Writes are best
    effort: a failing backend is logged and reported through the return value
    of :meth:`set`, never raised.
    """

    def __init__(self, backend: QSettings) -> None:
        self._qs = backend

    @property
    def backend(self) -> QSettings:
        return self._qs

    def contains(self, key: str) -> bool:
        return bool(self._qs.contains(key))

    def get(self, key: str, default: Any = None) -> Any:
        # A stored "false" or "" is a value, not an absence.
        if not self._qs.contains(key):
            return default
        return self._qs.value(key)

    def set(self, key: str, value: Any) -> bool:
        try:
            self._qs.setValue(key, value)
            self._qs.sync()
        except Exception as exc:
            self._report_failure(classify_exception(exc, key=key))
            return False

        status = self._qs.status()
        if status != QSettings.Status.NoError:
            code = (
                ErrorCode.STORAGE_UNAVAILABLE
                if status == QSettings.Status.AccessError
                else ErrorCode.STORAGE_WRITE_FAILED
            )
            self._report_failure(
                LifecycleViewError(code, key=key, details={"status": status.name})
            )
            return False
        return True

    @staticmethod
    def _report_failure(error: LifecycleViewError) -> None:
        logger.warning("Failed to save settings: %s", error.to_dict())


class AppSettings:
    """Resolves the settings backend, data directory and log level."""

    def __init__(self, backend: QSettings | None = None) -> None:
        self._qs = backend if backend is not None else self._default_backend()
        self._store = PreferenceStore(self._qs)

    @property
    def store(self) -> PreferenceStore:
        return self._store

    @property
    def settings_location(self) -> str:
        return self._qs.fileName()

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def user_theme_path(self) -> Path:
        return self.app_data_dir / THEME_FILE_NAME

    @property
    def log_level(self) -> int:
        raw = (os.environ.get(LOG_LEVEL_ENV) or "").strip().upper()
        level = logging.getLevelName(raw) if raw else logging.INFO
        if isinstance(level, int):
            return level
        return logging.INFO

    @staticmethod
    def _default_backend() -> QSettings:
        settings_file = (os.environ.get(SETTINGS_FILE_ENV) or "").strip()
        if settings_file:
            return QSettings(settings_file, QSettings.Format.IniFormat)
        return QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    @staticmethod
    def _app_data_dir() -> Path:
        override = (os.environ.get(DATA_DIR_ENV) or "").strip()
        if override:
            return Path(override)
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "lifecycleview"
