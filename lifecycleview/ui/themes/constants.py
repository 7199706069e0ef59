"""Theme framework constants."""

from __future__ import annotations

ROLE_KEYS: tuple[str, ...] = (
    "background",
    "text",
    "render",
    "pre_commit",
    "commit",
)

VARIANT_KEYS: tuple[str, ...] = (
    "light",
    "dark",
)
