"""Static credits footer."""

from __future__ import annotations

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QFrame, QHBoxLayout, QWidget

from lifecycleview.i18n.translator import Translator
from lifecycleview.ui.widgets.translated_label import TranslatedLabel

REPOSITORY_URL = "https://github.com/wojtekmaj/react-lifecycle-methods-diagram"
AUTHOR_URL = "https://wojtekmaj.pl"


class LinkLabel(TranslatedLabel):
    """Translated label that opens a URL when clicked."""

    def __init__(self, source_text: str, url: str, translator: Translator, parent: QWidget | None = None) -> None:
        super().__init__(source_text, translator, parent)
        self._url = url
        self.setObjectName("FooterLink")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(url)

    @property
    def url(self) -> str:
        return self._url

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            QDesktopServices.openUrl(QUrl(self._url))
        super().mousePressEvent(event)


class Footer(QFrame):
    """Repository link and author credit."""

    def __init__(self, translator: Translator, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("Footer")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)
        layout.addStretch(1)

        self._repo_link = LinkLabel("See project's repository", REPOSITORY_URL, translator)
        self._author_link = LinkLabel("Created by Wojciech Maj", AUTHOR_URL, translator)
        layout.addWidget(self._repo_link)
        layout.addWidget(self._author_link)

        layout.addStretch(1)

    def links(self) -> list[LinkLabel]:
        return [self._repo_link, self._author_link]
