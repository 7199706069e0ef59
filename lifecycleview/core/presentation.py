"""Keeps the application-wide language and layout direction in sync."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from PySide6.QtCore import QLocale, QObject, Qt, Signal
from PySide6.QtGui import QGuiApplication

from lifecycleview.core.locales import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    TextDirection,
    direction_for,
    effective_locale,
)


@dataclass(frozen=True, slots=True)
class PresentationState:
    """Derived presentation attributes for the active locale."""

    language_tag: str
    text_direction: TextDirection


class PresentationContext(QObject):
    """Global presentation attributes shared by every window.

    Optionally bound to a QGuiApplication, in which case the default QLocale
    and the application layout direction follow the state.
    """

    presentation_changed = Signal(str, str)  # language tag, direction

    def __init__(self, app: QGuiApplication | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._app = app
        self._state = PresentationState(DEFAULT_LOCALE, "ltr")

    @property
    def state(self) -> PresentationState:
        return self._state

    @property
    def language_tag(self) -> str:
        return self._state.language_tag

    @property
    def text_direction(self) -> TextDirection:
        return self._state.text_direction

    def write(self, state: PresentationState) -> None:
        """Replace the state; called by :class:`DocumentPresentationSync`."""
        self._state = state
        if self._app is not None:
            QLocale.setDefault(QLocale(state.language_tag.replace("-", "_")))
            self._app.setLayoutDirection(
                Qt.LayoutDirection.RightToLeft
                if state.text_direction == "rtl"
                else Qt.LayoutDirection.LeftToRight
            )
        self.presentation_changed.emit(state.language_tag, state.text_direction)


class DocumentPresentationSync:
    """The single writer of a :class:`PresentationContext`."""

    def __init__(
        self,
        context: PresentationContext,
        supported: Iterable[str] = SUPPORTED_LOCALES,
    ) -> None:
        self._context = context
        self._supported = tuple(supported)

    @property
    def context(self) -> PresentationContext:
        return self._context

    def apply(self, locale: str, supported: Iterable[str] | None = None) -> PresentationState:
        locales = self._supported if supported is None else tuple(supported)
        tag = effective_locale(locale, locales)
        state = PresentationState(language_tag=tag, text_direction=direction_for(tag))
        self._context.write(state)
        return state
