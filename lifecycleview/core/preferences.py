"""Typed preference specs, functional updates and the boolean adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

from lifecycleview.config.settings import PreferenceStore
from lifecycleview.errors import ErrorCode

logger = logging.getLogger(__name__)

T = TypeVar("T")

Update = Union[T, Callable[[T], T]]


def apply_update(current: T, update: Update[T]) -> T:
    """Resolve a literal value or a function of the current value."""
    if callable(update):
        return update(current)
    return update


class PreferenceType(Enum):
    BOOL = "bool"
    STR = "str"


def decode_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw)
    if text not in ("true", "false"):
        logger.debug("%s: %r read as false", ErrorCode.PREFERENCE_MALFORMED.name, raw)
    return text == "true"


def decode_str(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw)


_DECODERS: dict[PreferenceType, Callable[[Any], Any]] = {
    PreferenceType.BOOL: decode_bool,
    PreferenceType.STR: decode_str,
}

_ENCODERS: dict[PreferenceType, Callable[[Any], Any]] = {
    PreferenceType.BOOL: bool,
    PreferenceType.STR: str,
}


@dataclass(frozen=True, slots=True)
class PreferenceSpec:
    """A named persisted value with its declared type and default."""

    key: str
    declared_type: PreferenceType
    default: Any

    def decode(self, raw: Any) -> Any:
        return _DECODERS[self.declared_type](raw)

    def encode(self, value: Any) -> Any:
        return _ENCODERS[self.declared_type](value)


SHOW_ADVANCED = PreferenceSpec("showAdvanced", PreferenceType.BOOL, False)
LOCALE = PreferenceSpec("locale", PreferenceType.STR, "")
REACT_VERSION = PreferenceSpec("reactVersion", PreferenceType.STR, "")
DARK_THEME = PreferenceSpec("darkTheme", PreferenceType.BOOL, False)


class Preference(Generic[T]):
    """Reads and writes one :class:`PreferenceSpec` through the store."""

    def __init__(self, store: PreferenceStore, spec: PreferenceSpec) -> None:
        self._store = store
        self._spec = spec

    def is_set(self) -> bool:
        return self._store.contains(self._spec.key)

    def read(self, default: T | None = None) -> T:
        fallback = self._spec.default if default is None else default
        if not self._store.contains(self._spec.key):
            return fallback
        return self._spec.decode(self._store.get(self._spec.key, fallback))

    def update(self, update: Update[T], current: T | None = None) -> T:
        base = self.read() if current is None else current
        value = apply_update(base, update)
        self._store.set(self._spec.key, self._spec.encode(value))
        return value


class BooleanPreference:
    """Boolean view of the store for values saved as bools or "true"/"false"."""

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    def read(self, key: str, default: bool) -> bool:
        if not self._store.contains(key):
            return default
        return decode_bool(self._store.get(key, default))

    def update(
        self,
        key: str,
        next_value: Update[bool],
        current: bool | None = None,
        default: bool = False,
    ) -> bool:
        base = self.read(key, default) if current is None else current
        value = bool(apply_update(base, next_value))
        self._store.set(key, value)
        return value
