"""Lifecycle diagram grid: stages as columns, phases as rows."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QGridLayout, QLabel, QLayout, QVBoxLayout, QWidget

from lifecycleview.core.lifecycle import (
    PHASE_DESCRIPTIONS,
    PHASE_TITLES,
    STAGE_TITLES,
    STAGES,
    DiagramModel,
    build_diagram,
)
from lifecycleview.core.versions import SUPPORTED_REACT_VERSIONS
from lifecycleview.i18n.translator import Translator
from lifecycleview.ui.widgets.translated_label import T


def _clear_layout(layout: QLayout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()
        elif item.layout() is not None:
            _clear_layout(item.layout())


class DiagramView(QFrame):
    """Renders a :class:`DiagramModel` for the current advanced/version props."""

    def __init__(
        self,
        translator: Translator,
        advanced: bool = False,
        react_version: str = SUPPORTED_REACT_VERSIONS[-1],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("DiagramView")
        self._translator = translator
        self._model = build_diagram(advanced, react_version)
        self._phase_labels: dict[str, QLabel] = {}

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(8)

        self._notice = QLabel()
        self._notice.setObjectName("VersionNotice")
        self._notice.hide()
        outer.addWidget(self._notice)

        self._grid = QGridLayout()
        self._grid.setContentsMargins(0, 0, 0, 0)
        self._grid.setSpacing(2)
        outer.addLayout(self._grid, 1)

        self._rebuild()
        translator.locale_changed.connect(self._retranslate_tooltips)

    @property
    def model(self) -> DiagramModel:
        return self._model

    def set_advanced(self, advanced: bool) -> None:
        self.set_props(advanced, self._model.requested_version)

    def set_react_version(self, react_version: str) -> None:
        self.set_props(self._model.advanced, react_version)

    def set_props(self, advanced: bool, react_version: str) -> None:
        model = build_diagram(advanced, react_version)
        if model == self._model:
            return
        self._model = model
        self._rebuild()

    def _rebuild(self) -> None:
        _clear_layout(self._grid)
        self._phase_labels = {}
        model = self._model

        if model.version_supported:
            self._notice.hide()
        else:
            self._notice.setText(
                f"{model.requested_version} → {model.react_version}"
            )
            self._notice.show()

        for column, stage in enumerate(STAGES, start=1):
            header = T(STAGE_TITLES[stage], self._translator)
            header.setObjectName("StageHeader")
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._grid.addWidget(header, 0, column)

        for row, phase in enumerate(model.phases, start=1):
            phase_label = T(PHASE_TITLES[phase], self._translator)
            phase_label.setObjectName("PhaseLabel")
            self._phase_labels[phase] = phase_label
            self._grid.addWidget(phase_label, row, 0)
            for column, stage in enumerate(STAGES, start=1):
                self._grid.addWidget(self._build_cell(stage, phase), row, column)

        if model.derived_state_triggers:
            triggers = QLabel(" · ".join(self._translator.tr(t) for t in model.derived_state_triggers))
            triggers.setObjectName("TriggerLine")
            triggers.setToolTip("getDerivedStateFromProps")
            self._grid.addWidget(triggers, len(model.phases) + 1, 2)
        self._retranslate_tooltips()

    def _retranslate_tooltips(self, _locale: str = "") -> None:
        for phase, label in self._phase_labels.items():
            label.setToolTip(self._translator.tr(PHASE_DESCRIPTIONS[phase]))

    def _build_cell(self, stage: str, phase: str) -> QFrame:
        cell = QFrame()
        cell.setObjectName("PhaseCell")
        cell.setProperty("phase", phase)
        layout = QVBoxLayout(cell)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(4)
        for method in self._model.methods_for(stage, phase):
            box = T(method.name, self._translator)
            box.setObjectName("MethodBox")
            box.setProperty("advanced", method.advanced_only)
            box.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(box)
        layout.addStretch(1)
        return cell
