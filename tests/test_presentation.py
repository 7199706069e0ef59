"""Tests for the presentation context and its sync."""

from __future__ import annotations

from PySide6.QtCore import QLocale, Qt

from lifecycleview.core.presentation import (
    DocumentPresentationSync,
    PresentationContext,
    PresentationState,
)


def test_apply_sets_language_and_direction():
    context = PresentationContext()
    state = DocumentPresentationSync(context).apply("fa-IR")
    assert state == PresentationState("fa-IR", "rtl")
    assert context.language_tag == "fa-IR"
    assert context.text_direction == "rtl"


def test_apply_is_idempotent():
    context = PresentationContext()
    sync = DocumentPresentationSync(context)
    first = sync.apply("ar")
    second = sync.apply("ar")
    assert first == second == context.state


def test_unsupported_locale_falls_back_to_default():
    context = PresentationContext()
    DocumentPresentationSync(context).apply("xx-YY")
    assert context.state == PresentationState("en-US", "ltr")


def test_explicit_supported_list_overrides_default():
    context = PresentationContext()
    sync = DocumentPresentationSync(context, supported=["en-US"])
    sync.apply("fr-FR")
    assert context.language_tag == "en-US"
    sync.apply("fr-FR", supported=["en-US", "fr-FR"])
    assert context.language_tag == "fr-FR"


def test_presentation_changed_emitted_on_every_apply():
    context = PresentationContext()
    seen: list[tuple[str, str]] = []
    context.presentation_changed.connect(lambda tag, direction: seen.append((tag, direction)))
    sync = DocumentPresentationSync(context)
    sync.apply("ar")
    sync.apply("de-DE")
    assert seen == [("ar", "rtl"), ("de-DE", "ltr")]


def test_bound_application_follows_state(qapp):
    context = PresentationContext(qapp)
    sync = DocumentPresentationSync(context)
    try:
        sync.apply("ar")
        assert qapp.layoutDirection() == Qt.LayoutDirection.RightToLeft
        assert QLocale().language() == QLocale.Language.Arabic

        sync.apply("fr-FR")
        assert qapp.layoutDirection() == Qt.LayoutDirection.LeftToRight
        assert QLocale().language() == QLocale.Language.French
    finally:
        sync.apply("en-US")


def test_context_write_emits_tag_and_direction():
    context = PresentationContext()
    seen: list[tuple[str, str]] = []
    context.presentation_changed.connect(lambda tag, direction: seen.append((tag, direction)))
    context.write(PresentationState("ar", "rtl"))
    assert context.state == PresentationState("ar", "rtl")
    assert seen == [("ar", "rtl")]
