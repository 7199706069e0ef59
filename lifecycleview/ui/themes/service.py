"""Runtime theme apply service."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import QApplication

from lifecycleview.config.settings import PreferenceStore
from lifecycleview.core.preferences import DARK_THEME, BooleanPreference
from lifecycleview.errors import ErrorCode, LifecycleViewError
from lifecycleview.ui.theme import DARK_THEME as BUILTIN_DARK
from lifecycleview.ui.theme import LIGHT_THEME as BUILTIN_LIGHT
from lifecycleview.ui.themes.compiler import compile_theme_stylesheet
from lifecycleview.ui.themes.loader import load_theme_pair, validate_theme_pair
from lifecycleview.ui.themes.models import ThemePair, ThemeValidationError

logger = logging.getLogger(__name__)


def builtin_theme_pair() -> ThemePair:
    return validate_theme_pair(BUILTIN_LIGHT, BUILTIN_DARK)


class ThemeService(QObject):
    """Apply the light or dark variant of a theme pair to the application.

    Dark mode follows the system color scheme unless the user has chosen a
    variant explicitly, in which case the stored choice wins.
    """

    theme_changed = Signal(bool)  # is dark

    def __init__(
        self,
        app: QApplication,
        store: PreferenceStore,
        theme: ThemePair | None = None,
        user_theme_path: Path | None = None,
    ) -> None:
        super().__init__()
        self._app = app
        self._store = store
        self._flags = BooleanPreference(store)
        self._theme = theme if theme is not None else self._load_theme(user_theme_path)
        self._is_dark = False
        self._following_system = False

    @property
    def theme(self) -> ThemePair:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def has_user_override(self) -> bool:
        return self._store.contains(DARK_THEME.key)

    def system_prefers_dark(self) -> bool:
        hints = self._app.styleHints()
        return hints.colorScheme() == Qt.ColorScheme.Dark

    def resolve_dark_mode(self) -> bool:
        if self.has_user_override:
            return self._flags.read(DARK_THEME.key, DARK_THEME.default)
        return self.system_prefers_dark()

    def follow_system(self) -> None:
        if self._following_system:
            return
        self._app.styleHints().colorSchemeChanged.connect(self._on_system_scheme_changed)
        self._following_system = True

    def apply(self) -> bool:
        self._apply_variant(self.resolve_dark_mode())
        return self._is_dark

    def toggle_dark_mode(self) -> bool:
        dark = self._flags.update(DARK_THEME.key, lambda previous: not previous, current=self._is_dark)
        self._apply_variant(dark)
        return dark

    def _on_system_scheme_changed(self, _scheme) -> None:
        if self.has_user_override:
            return
        self._apply_variant(self.system_prefers_dark())

    def _apply_variant(self, dark: bool) -> None:
        self._app.setStyleSheet(compile_theme_stylesheet(self._theme, dark))
        self._is_dark = dark
        self.theme_changed.emit(dark)

    @staticmethod
    def _load_theme(path: Path | None) -> ThemePair:
        if path is None or not path.exists():
            return builtin_theme_pair()
        try:
            return load_theme_pair(path)
        except ThemeValidationError as exc:
            error = LifecycleViewError(ErrorCode.THEME_INVALID, details={"reason": str(exc)})
            logger.warning("theme file ignored: %s", error.to_dict())
            return builtin_theme_pair()
