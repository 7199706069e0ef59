"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass


class ThemeValidationError(ValueError):
    """Raised when a theme mapping or pair fails validation."""


@dataclass(frozen=True, slots=True)
class ThemePair:
    """Light and dark color-role mappings with identical role names."""

    light: dict[str, str]
    dark: dict[str, str]

    def mapping(self, dark: bool) -> dict[str, str]:
        return self.dark if dark else self.light
