"""Post-mount layout stabilization hooks."""

from __future__ import annotations

from typing import Callable, Protocol

import shiboken6
from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QWidget

# Qt's QWIDGETSIZE_MAX.
_MAX_WIDGET_SIZE = (1 << 24) - 1

Scheduler = Callable[[Callable[[], None]], None]


def next_frame(callback: Callable[[], None]) -> None:
    """Run ``callback`` on the next turn of the event loop."""
    QTimer.singleShot(0, callback)


class LayoutStabilizer(Protocol):
    def stabilize(self, widget: QWidget) -> None:
        ...


class NoopLayoutStabilizer:
    """For targets whose layout engine needs no help."""

    def stabilize(self, widget: QWidget) -> None:
        return None


class FramePinLayoutStabilizer:
    """Pin a widget's width for one frame, then hand sizing back to the layout.

    Grid layouts can settle on different column widths after the first
    hover-driven relayout unless the width is fixed explicitly once right
    after the initial layout pass.
    """

    def __init__(self, schedule: Scheduler = next_frame) -> None:
        self._schedule = schedule

    def stabilize(self, widget: QWidget) -> None:
        if widget is None:
            return

        def pin() -> None:
            if not shiboken6.isValid(widget):
                return
            widget.setFixedWidth(widget.width())
            self._schedule(release)

        def release() -> None:
            if not shiboken6.isValid(widget):
                return
            widget.setMinimumWidth(0)
            widget.setMaximumWidth(_MAX_WIDGET_SIZE)

        self._schedule(pin)
