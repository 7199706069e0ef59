"""Locale resolution and text direction."""

from __future__ import annotations

import logging
from typing import Iterable, Literal

from PySide6.QtCore import QLocale

from lifecycleview.config.settings import PreferenceStore
from lifecycleview.errors import ErrorCode

logger = logging.getLogger(__name__)

TextDirection = Literal["ltr", "rtl"]

DEFAULT_LOCALE = "en-US"

SUPPORTED_LOCALES: tuple[str, ...] = (
    "ar",
    "ca-ES",
    "cs-CZ",
    "de-DE",
    "en-US",
    "es-ES",
    "fa-IR",
    "fr-FR",
    "it-IT",
    "ja-JP",
    "ko-KR",
    "nl-NL",
    "pl-PL",
    "pt-BR",
    "ru-RU",
    "tr-TR",
    "uk-UA",
    "zh-CN",
    "zh-TW",
)

RTL_LANGUAGES: frozenset[str] = frozenset({"ar", "fa"})

LOCALE_KEY = "locale"


def normalize_tag(tag: str) -> str:
    return tag.strip().replace("_", "-")


def language_code(tag: str) -> str:
    return normalize_tag(tag).split("-", 1)[0].lower()


def match_locale(preferred: Iterable[str], supported: Iterable[str]) -> str | None:
    """Return the first supported locale matching the preferred list.

    Each preferred entry is tried in order, first as an exact tag and then
    by language subtag alone.
    """
    candidates = tuple(supported)
    by_tag = {normalize_tag(tag).lower(): tag for tag in candidates}
    for raw in preferred:
        if not isinstance(raw, str) or not raw.strip():
            continue
        exact = by_tag.get(normalize_tag(raw).lower())
        if exact is not None:
            return exact
        language = language_code(raw)
        for tag in candidates:
            if language_code(tag) == language:
                return tag
    return None


def system_preferred_languages() -> list[str]:
    return list(QLocale.system().uiLanguages())


def resolve_initial_locale(
    store: PreferenceStore,
    supported: Iterable[str] = SUPPORTED_LOCALES,
    preferred: Iterable[str] | None = None,
) -> str:
    """Pick the locale to start with.

    A stored preference wins and is returned unvalidated; otherwise the
    environment's preferred languages are matched against ``supported``.
    """
    if store.contains(LOCALE_KEY):
        stored = store.get(LOCALE_KEY, DEFAULT_LOCALE)
        return str(stored)
    languages = system_preferred_languages() if preferred is None else list(preferred)
    matched = match_locale(languages, supported)
    if matched is None:
        logger.debug("No supported locale in %s; using %s", languages, DEFAULT_LOCALE)
        return DEFAULT_LOCALE
    return matched


def effective_locale(stored: str, supported: Iterable[str] = SUPPORTED_LOCALES) -> str:
    if stored in tuple(supported):
        return stored
    logger.debug(
        "%s: %r; falling back to %s", ErrorCode.LOCALE_UNSUPPORTED.name, stored, DEFAULT_LOCALE
    )
    return DEFAULT_LOCALE


def direction_for(tag: str) -> TextDirection:
    if language_code(tag) in RTL_LANGUAGES:
        return "rtl"
    return "ltr"
