"""Supported feature-set versions of the diagrammed library."""

from __future__ import annotations

# Ordered oldest to newest; the last entry is the default selection.
SUPPORTED_REACT_VERSIONS: tuple[str, ...] = (
    "16.3",
    "16.4",
)


def latest_react_version(versions: tuple[str, ...] = SUPPORTED_REACT_VERSIONS) -> str:
    if not versions:
        raise ValueError("At least one supported version is required")
    return versions[-1]


def is_supported_version(version: str, versions: tuple[str, ...] = SUPPORTED_REACT_VERSIONS) -> bool:
    return version in versions
