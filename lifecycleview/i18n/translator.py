"""Active-locale translation context shared by translated widgets."""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from lifecycleview.core.locales import DEFAULT_LOCALE
from lifecycleview.i18n.catalog import TranslationCatalog


class Translator(QObject):
    """Holds the active locale and translates source strings for it."""

    locale_changed = Signal(str)

    def __init__(
        self,
        catalog: TranslationCatalog,
        locale: str = DEFAULT_LOCALE,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._catalog = catalog
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    def set_locale(self, locale: str, _direction: str = "") -> None:
        if locale == self._locale:
            return
        self._locale = locale
        self.locale_changed.emit(locale)

    def tr(self, text: str) -> str:
        return self._catalog.translate(text, self._locale)
