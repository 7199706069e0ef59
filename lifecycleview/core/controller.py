"""Root preference state and its toggle handlers."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from lifecycleview.config.settings import PreferenceStore
from lifecycleview.core.locales import SUPPORTED_LOCALES, resolve_initial_locale
from lifecycleview.core.preferences import (
    LOCALE,
    REACT_VERSION,
    SHOW_ADVANCED,
    BooleanPreference,
    Preference,
)
from lifecycleview.core.presentation import DocumentPresentationSync
from lifecycleview.core.versions import SUPPORTED_REACT_VERSIONS, latest_react_version

logger = logging.getLogger(__name__)


class RootController(QObject):
    """Owns the advanced flag, locale and version selection.

    Values are read once at construction; afterwards the in-memory value is
    authoritative for the session and every change is written through the
    store. Locale changes re-run the presentation sync.
    """

    advanced_changed = Signal(bool)
    locale_changed = Signal(str)
    react_version_changed = Signal(str)

    def __init__(
        self,
        store: PreferenceStore,
        presentation: DocumentPresentationSync,
        *,
        supported_locales: tuple[str, ...] = SUPPORTED_LOCALES,
        supported_versions: tuple[str, ...] = SUPPORTED_REACT_VERSIONS,
        preferred_languages: list[str] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._presentation = presentation
        self._supported_locales = supported_locales
        self._supported_versions = supported_versions
        self._flags = BooleanPreference(store)
        self._locale_pref = Preference(store, LOCALE)
        self._version_pref = Preference(store, REACT_VERSION)

        initial_locale = resolve_initial_locale(store, supported_locales, preferred_languages)
        self._advanced = self._flags.read(SHOW_ADVANCED.key, SHOW_ADVANCED.default)
        self._locale = self._locale_pref.read(initial_locale)
        self._react_version = self._version_pref.read(latest_react_version(supported_versions))
        self._mounted = False

        self.locale_changed.connect(self._sync_presentation)

    @property
    def advanced(self) -> bool:
        return self._advanced

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def react_version(self) -> str:
        return self._react_version

    @property
    def supported_locales(self) -> tuple[str, ...]:
        return self._supported_locales

    @property
    def supported_versions(self) -> tuple[str, ...]:
        return self._supported_versions

    def mount(self) -> None:
        """Apply the initial presentation once, before the first paint."""
        if self._mounted:
            return
        self._mounted = True
        self._sync_presentation(self._locale)

    def toggle_advanced(self) -> bool:
        self._advanced = self._flags.update(
            SHOW_ADVANCED.key,
            lambda previous: not previous,
            current=self._advanced,
        )
        self.advanced_changed.emit(self._advanced)
        return self._advanced

    def set_advanced(self, value: bool) -> None:
        if bool(value) == self._advanced:
            return
        self._advanced = self._flags.update(SHOW_ADVANCED.key, bool(value))
        self.advanced_changed.emit(self._advanced)

    def set_locale(self, locale: str) -> None:
        if locale == self._locale:
            return
        self._locale = self._locale_pref.update(locale)
        logger.debug("locale selection changed to %s", self._locale)
        self.locale_changed.emit(self._locale)

    def set_react_version(self, version: str) -> None:
        if version == self._react_version:
            return
        self._react_version = self._version_pref.update(version)
        self.react_version_changed.emit(self._react_version)

    def _sync_presentation(self, locale: str) -> None:
        self._presentation.apply(locale, self._supported_locales)
