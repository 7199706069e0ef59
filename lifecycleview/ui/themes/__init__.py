"""Theme framework exports."""

from lifecycleview.ui.themes.constants import ROLE_KEYS
from lifecycleview.ui.themes.models import ThemePair, ThemeValidationError
from lifecycleview.ui.themes.service import ThemeService

__all__ = [
    "ROLE_KEYS",
    "ThemePair",
    "ThemeValidationError",
    "ThemeService",
]
