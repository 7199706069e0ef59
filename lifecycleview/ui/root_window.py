"""Main application window composing options, diagram and footer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from lifecycleview.ui.layout import FramePinLayoutStabilizer, LayoutStabilizer
from lifecycleview.ui.utils import safe_disconnect_multiple
from lifecycleview.ui.widgets.diagram_view import DiagramView
from lifecycleview.ui.widgets.footer import Footer
from lifecycleview.ui.widgets.options_panel import OptionsPanel
from lifecycleview.ui.widgets.translated_label import T

if TYPE_CHECKING:
    from lifecycleview.core.controller import RootController
    from lifecycleview.i18n.translator import Translator
    from lifecycleview.ui.themes.service import ThemeService

TITLE = "React lifecycle methods diagram"


class RootWindow(QMainWindow):
    """Top-level window driven by a :class:`RootController`."""

    def __init__(
        self,
        controller: RootController,
        translator: Translator,
        theme_service: ThemeService | None = None,
        stabilizer: LayoutStabilizer | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._translator = translator
        self._theme_service = theme_service
        self._stabilizer = stabilizer if stabilizer is not None else FramePinLayoutStabilizer()
        self._stabilized = False
        self._dark_button: QPushButton | None = None

        self.setObjectName("RootWindow")
        self.setMinimumSize(760, 520)
        self.resize(1100, 720)

        self._setup_layout()
        self._connect()
        self._retranslate()

    @property
    def container(self) -> QWidget:
        return self._container

    @property
    def options_panel(self) -> OptionsPanel:
        return self._options

    @property
    def diagram_view(self) -> DiagramView:
        return self._diagram

    @property
    def footer(self) -> Footer:
        return self._footer

    def _setup_layout(self) -> None:
        controller = self._controller
        self._container = QWidget()
        self._container.setObjectName("RootContainer")
        self.setCentralWidget(self._container)

        outer = QVBoxLayout(self._container)
        outer.setContentsMargins(24, 16, 24, 8)
        outer.setSpacing(12)

        header = QHBoxLayout()
        header.setContentsMargins(0, 0, 0, 0)
        self._title = T(TITLE, self._translator)
        self._title.setObjectName("DiagramTitle")
        header.addWidget(self._title, 1)
        if self._theme_service is not None:
            self._dark_button = QPushButton()
            self._dark_button.setObjectName("DarkThemeToggle")
            self._dark_button.setCheckable(True)
            self._dark_button.setChecked(self._theme_service.is_dark)
            header.addWidget(self._dark_button)
        outer.addLayout(header)

        self._options = OptionsPanel(
            self._translator,
            controller.supported_locales,
            controller.supported_versions,
        )
        self._options.set_values(controller.advanced, controller.locale, controller.react_version)
        outer.addWidget(self._options)

        self._diagram = DiagramView(
            self._translator,
            advanced=controller.advanced,
            react_version=controller.react_version,
        )
        outer.addWidget(self._diagram, 1)

        self._footer = Footer(self._translator)
        outer.addWidget(self._footer)

    def _connect(self) -> None:
        self._options.advanced_toggled.connect(self._controller.toggle_advanced)
        self._options.locale_selected.connect(self._controller.set_locale)
        self._options.react_version_selected.connect(self._controller.set_react_version)

        self._controller.advanced_changed.connect(self._on_advanced_changed)
        self._controller.locale_changed.connect(self._on_preferences_changed)
        self._controller.react_version_changed.connect(self._on_react_version_changed)
        self._translator.locale_changed.connect(self._retranslate)

        if self._theme_service is not None and self._dark_button is not None:
            self._dark_button.clicked.connect(self._theme_service.toggle_dark_mode)
            self._theme_service.theme_changed.connect(self._dark_button.setChecked)

    def _on_advanced_changed(self, advanced: bool) -> None:
        self._diagram.set_advanced(advanced)
        self._on_preferences_changed()

    def _on_react_version_changed(self, react_version: str) -> None:
        self._diagram.set_react_version(react_version)
        self._on_preferences_changed()

    def _on_preferences_changed(self, *_args) -> None:
        c = self._controller
        self._options.set_values(c.advanced, c.locale, c.react_version)

    def _retranslate(self, _locale: str = "") -> None:
        self.setWindowTitle(self._translator.tr(TITLE))
        if self._dark_button is not None:
            self._dark_button.setText(self._translator.tr("Dark theme"))

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if not self._stabilized:
            self._stabilized = True
            self._stabilizer.stabilize(self._container)

    def closeEvent(self, event) -> None:
        safe_disconnect_multiple([
            (self._controller.advanced_changed, self._on_advanced_changed),
            (self._controller.locale_changed, self._on_preferences_changed),
            (self._controller.react_version_changed, self._on_react_version_changed),
            (self._translator.locale_changed, self._retranslate),
        ])
        super().closeEvent(event)
