"""Error codes and error handling utilities for LifecycleView."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for LifecycleView operations."""

    # Storage errors
    STORAGE_WRITE_FAILED = auto()
    STORAGE_UNAVAILABLE = auto()

    # Preference value errors
    LOCALE_UNSUPPORTED = auto()
    PREFERENCE_MALFORMED = auto()

    # Resource errors
    THEME_INVALID = auto()
    TRANSLATION_INVALID = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.STORAGE_WRITE_FAILED: "Failed to save settings. Changes last until the app is closed.",
    ErrorCode.STORAGE_UNAVAILABLE: "Settings storage is unavailable. Check folder permissions.",
    ErrorCode.LOCALE_UNSUPPORTED: "The saved language is not supported. Using the default language.",
    ErrorCode.PREFERENCE_MALFORMED: "A saved preference had an unexpected value and was reset.",
    ErrorCode.THEME_INVALID: "The theme file is invalid. Using the built-in theme.",
    ErrorCode.TRANSLATION_INVALID: "A translation table could not be read. Showing untranslated text.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class LifecycleViewError(Exception):
    """Base exception for LifecycleView with error code and context."""

    code: ErrorCode
    message: str = ""
    key: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.key:
            parts.append(f"\nKey: {self.key}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "key": self.key,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, key: str | None = None) -> LifecycleViewError:
    """Classify a generic exception into a LifecycleViewError with appropriate code."""
    if isinstance(exc, LifecycleViewError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if "PermissionError" in exc_name or "permission denied" in exc_str or "access" in exc_str:
        return LifecycleViewError(ErrorCode.STORAGE_UNAVAILABLE, key=key, details={"original": exc_str})
    if "no space left" in exc_str or "quota" in exc_str or "disk full" in exc_str:
        return LifecycleViewError(ErrorCode.STORAGE_WRITE_FAILED, key=key, details={"original": exc_str})
    if "unavailable" in exc_str or "read-only" in exc_str or "readonly" in exc_str:
        return LifecycleViewError(ErrorCode.STORAGE_UNAVAILABLE, key=key, details={"original": exc_str})
    if isinstance(exc, OSError):
        return LifecycleViewError(ErrorCode.STORAGE_WRITE_FAILED, key=key, details={"original": exc_str})

    return LifecycleViewError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        key=key,
        details={"original": exc_str},
    )


def format_error_for_user(error: LifecycleViewError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, LifecycleViewError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
