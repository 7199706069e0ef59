"""Theme pair parsing and validation."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Mapping

from lifecycleview.ui.themes.constants import ROLE_KEYS, VARIANT_KEYS
from lifecycleview.ui.themes.models import ThemePair, ThemeValidationError

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_COLOR_RE = re.compile(r"^(?:rgb|rgba|hsl|hsla)\([^)]+\)$", re.IGNORECASE)
_NAMED_COLOR_RE = re.compile(r"^[a-zA-Z]{3,20}$")

_MAX_THEME_BYTES = 32 * 1024
_MAX_COLOR_VALUE_LEN = 64


def validate_theme_mapping(data: Mapping[str, object], context: str) -> dict[str, str]:
    """Return a cleaned role mapping or raise ThemeValidationError."""
    _reject_unknown_keys(data, allowed=set(ROLE_KEYS), context=context)
    missing = [key for key in ROLE_KEYS if key not in data]
    if missing:
        joined = ", ".join(sorted(missing))
        raise ThemeValidationError(f"{context}: missing required role keys: {joined}")

    roles: dict[str, str] = {}
    for key in ROLE_KEYS:
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ThemeValidationError(f"{context}: role {key!r} must be a non-empty string")
        cleaned = value.strip()
        if len(cleaned) > _MAX_COLOR_VALUE_LEN:
            raise ThemeValidationError(f"{context}: role {key!r} value is too long")
        if not _is_valid_color(cleaned):
            raise ThemeValidationError(f"{context}: role {key!r} has invalid color {cleaned!r}")
        roles[key] = cleaned
    return roles


def validate_theme_pair(
    light: Mapping[str, object],
    dark: Mapping[str, object],
) -> ThemePair:
    """Validate both mappings and check they define the same roles."""
    if set(light.keys()) != set(dark.keys()):
        only_light = sorted(set(light.keys()) - set(dark.keys()))
        only_dark = sorted(set(dark.keys()) - set(light.keys()))
        raise ThemeValidationError(
            f"light and dark themes define different roles "
            f"(light only: {only_light}, dark only: {only_dark})"
        )
    return ThemePair(
        light=validate_theme_mapping(light, "light"),
        dark=validate_theme_mapping(dark, "dark"),
    )


def load_theme_pair(path: Path) -> ThemePair:
    """Load a ``{"light": {...}, "dark": {...}}`` JSON theme file."""
    data = _load_json(path)
    _reject_unknown_keys(data, allowed=set(VARIANT_KEYS), context=str(path))
    light = data.get("light")
    dark = data.get("dark")
    if not isinstance(light, dict) or not isinstance(dark, dict):
        raise ThemeValidationError(f"{path}: both 'light' and 'dark' objects are required")
    try:
        return validate_theme_pair(light, dark)
    except ThemeValidationError as exc:
        raise ThemeValidationError(f"{path}: {exc}") from exc


def _load_json(path: Path) -> Mapping[str, object]:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ThemeValidationError(f"Unable to stat {path}: {exc}") from exc
    if size > _MAX_THEME_BYTES:
        raise ThemeValidationError(f"{path}: file exceeds max size ({_MAX_THEME_BYTES} bytes)")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeValidationError(f"Unable to read {path}: {exc}") from exc
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ThemeValidationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ThemeValidationError(f"Expected JSON object in {path}")
    return data


def _is_valid_color(value: str) -> bool:
    if _HEX_COLOR_RE.match(value):
        return True
    if _FUNC_COLOR_RE.match(value):
        return True
    # Named colors such as "white"; QColor resolves them.
    if _NAMED_COLOR_RE.match(value):
        return True
    return False


def _reject_unknown_keys(
    data: Mapping[str, object],
    *,
    allowed: set[str],
    context: str,
) -> None:
    unknown = sorted(key for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise ThemeValidationError(f"{context}: unsupported keys found: {joined}")
