"""Label that renders its text through the active translation."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QWidget

from lifecycleview.i18n.translator import Translator


class TranslatedLabel(QLabel):
    """QLabel whose source text is re-translated on every locale change."""

    def __init__(self, source_text: str, translator: Translator, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._source_text = source_text
        self._translator = translator
        self._translator.locale_changed.connect(self.retranslate)
        self.retranslate()

    @property
    def source_text(self) -> str:
        return self._source_text

    def retranslate(self, _locale: str = "") -> None:
        self.setText(self._translator.tr(self._source_text))


T = TranslatedLabel
