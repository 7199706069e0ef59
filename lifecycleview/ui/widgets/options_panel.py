"""Preference controls shown above the diagram."""

from __future__ import annotations

from PySide6.QtCore import QLocale, Signal
from PySide6.QtWidgets import QCheckBox, QComboBox, QFrame, QHBoxLayout, QWidget

from lifecycleview.core.locales import DEFAULT_LOCALE
from lifecycleview.i18n.translator import Translator
from lifecycleview.ui.widgets.translated_label import T


def locale_display_name(tag: str) -> str:
    """Native language name for a tag, e.g. "français (France)"."""
    qlocale = QLocale(tag.replace("-", "_"))
    language = qlocale.nativeLanguageName()
    if not language:
        return tag
    if "-" in tag:
        territory = qlocale.nativeTerritoryName()
        if territory:
            return f"{language} ({territory})"
    return language


class OptionsPanel(QFrame):
    """Advanced toggle plus locale and version pickers.

    Emits the raw user selection; the owner decides what to persist.
    """

    advanced_toggled = Signal()
    locale_selected = Signal(str)
    react_version_selected = Signal(str)

    def __init__(
        self,
        translator: Translator,
        locales: tuple[str, ...],
        versions: tuple[str, ...],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("OptionsPanel")
        self._translator = translator

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        self._advanced_check = QCheckBox()
        self._advanced_check.toggled.connect(lambda _checked: self.advanced_toggled.emit())
        layout.addWidget(self._advanced_check)
        layout.addStretch(1)

        layout.addWidget(T("Language", translator))
        self._locale_combo = QComboBox()
        for tag in locales:
            self._locale_combo.addItem(locale_display_name(tag), tag)
        self._locale_combo.currentIndexChanged.connect(self._on_locale_index_changed)
        layout.addWidget(self._locale_combo)

        layout.addWidget(T("React version", translator))
        self._version_combo = QComboBox()
        for version in versions:
            self._version_combo.addItem(version, version)
        self._version_combo.currentIndexChanged.connect(self._on_version_index_changed)
        layout.addWidget(self._version_combo)

        translator.locale_changed.connect(self.retranslate)
        self.retranslate()

    def retranslate(self, _locale: str = "") -> None:
        self._advanced_check.setText(self._translator.tr("Show less common lifecycles"))

    def set_values(self, advanced: bool, locale: str, react_version: str) -> None:
        widgets = (self._advanced_check, self._locale_combo, self._version_combo)
        previous = [widget.blockSignals(True) for widget in widgets]
        try:
            self._advanced_check.setChecked(advanced)

            index = self._locale_combo.findData(locale)
            if index < 0 and locale:
                # Unsupported stored tags stay selectable.
                self._locale_combo.addItem(locale, locale)
                index = self._locale_combo.count() - 1
            if index < 0:
                index = self._locale_combo.findData(DEFAULT_LOCALE)
            self._locale_combo.setCurrentIndex(max(0, index))

            index = self._version_combo.findData(react_version)
            if index < 0:
                # Unknown stored versions stay selectable.
                self._version_combo.addItem(react_version, react_version)
                index = self._version_combo.count() - 1
            self._version_combo.setCurrentIndex(index)
        finally:
            for widget, blocked in zip(widgets, previous):
                widget.blockSignals(blocked)

    @property
    def advanced_checked(self) -> bool:
        return self._advanced_check.isChecked()

    @property
    def selected_locale(self) -> str:
        return str(self._locale_combo.currentData() or "")

    @property
    def selected_react_version(self) -> str:
        return str(self._version_combo.currentData() or "")

    def _on_locale_index_changed(self, index: int) -> None:
        tag = self._locale_combo.itemData(index)
        if isinstance(tag, str) and tag:
            self.locale_selected.emit(tag)

    def _on_version_index_changed(self, index: int) -> None:
        version = self._version_combo.itemData(index)
        if isinstance(version, str) and version:
            self.react_version_selected.emit(version)
