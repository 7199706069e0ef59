"""Translation tables loaded from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml

from lifecycleview.errors import ErrorCode, LifecycleViewError
from lifecycleview.runtime_paths import translations_root

logger = logging.getLogger(__name__)

_MAX_TABLE_BYTES = 256 * 1024


class TranslationCatalog:
    """Looks up translated strings per locale tag.

    Tables live in ``<root>/<tag>.yml`` as a flat mapping of source text to
    translated text. Tables are loaded lazily and cached; a missing or broken
    table behaves as an empty one.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = root if root is not None else translations_root()
        self._tables: dict[str, dict[str, str]] = {}
        self._load_errors: list[str] = []

    @property
    def root(self) -> Path:
        return self._root

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def available_locales(self) -> list[str]:
        if not self._root.exists():
            return []
        return sorted(path.stem for path in self._root.glob("*.yml"))

    def table(self, locale: str) -> dict[str, str]:
        cached = self._tables.get(locale)
        if cached is not None:
            return cached
        try:
            table = self._load_table(self._root / f"{locale}.yml")
        except LifecycleViewError as exc:
            logger.warning("translation table skipped: %s", exc.to_dict())
            self._load_errors.append(str(exc))
            table = {}
        self._tables[locale] = table
        return table

    def translate(self, text: str, locale: str) -> str:
        return self.table(locale).get(text, text)

    @staticmethod
    def _load_table(path: Path) -> dict[str, str]:
        if not path.exists():
            return {}
        try:
            if path.stat().st_size > _MAX_TABLE_BYTES:
                raise LifecycleViewError(
                    ErrorCode.TRANSLATION_INVALID,
                    details={"path": str(path), "reason": "file too large"},
                )
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise LifecycleViewError(
                ErrorCode.TRANSLATION_INVALID,
                details={"path": str(path), "reason": str(exc)},
            ) from exc
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise LifecycleViewError(
                ErrorCode.TRANSLATION_INVALID,
                details={"path": str(path), "reason": "expected a mapping"},
            )
        return {
            str(key): str(value)
            for key, value in data.items()
            if isinstance(key, str) and isinstance(value, str)
        }
