"""Theme compilation helpers."""

from __future__ import annotations

from lifecycleview.ui.theme import build_stylesheet
from lifecycleview.ui.themes.models import ThemePair


def compile_theme_stylesheet(theme: ThemePair, dark: bool) -> str:
    """Compile the active variant of a theme pair into an application stylesheet."""
    return build_stylesheet(roles=theme.mapping(dark))
