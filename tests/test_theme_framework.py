"""Tests for theme pair validation, loading and the theme service."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from lifecycleview.ui.theme import DARK_THEME, LIGHT_THEME
from lifecycleview.ui.themes.constants import ROLE_KEYS
from lifecycleview.ui.themes.loader import load_theme_pair, validate_theme_pair
from lifecycleview.ui.themes.models import ThemeValidationError
from lifecycleview.ui.themes.service import ThemeService, builtin_theme_pair


def _roles(color: str) -> dict[str, object]:
    return {key: color for key in ROLE_KEYS}


def _write_theme(path: Path, light: dict[str, object], dark: dict[str, object]) -> Path:
    path.write_text(json.dumps({"light": light, "dark": dark}, indent=2), encoding="utf-8")
    return path


def test_builtin_pair_is_valid():
    pair = builtin_theme_pair()
    assert set(pair.light) == set(pair.dark) == set(ROLE_KEYS)
    assert pair.mapping(dark=True)["background"] == DARK_THEME["background"]
    assert pair.mapping(dark=False)["background"] == LIGHT_THEME["background"]


def test_pair_with_different_roles_rejected():
    dark = _roles("#000000")
    dark.pop("commit")
    with pytest.raises(ThemeValidationError, match="different roles"):
        validate_theme_pair(_roles("#ffffff"), dark)


def test_pair_with_unknown_role_rejected():
    light = _roles("#ffffff")
    dark = _roles("#000000")
    light["accent"] = "#ff0000"
    dark["accent"] = "#ff0000"
    with pytest.raises(ThemeValidationError, match="unsupported keys"):
        validate_theme_pair(light, dark)


@pytest.mark.parametrize("bad", ["", "   ", "#12", "url(evil)", "rgb(1,2,3);x", 7])
def test_invalid_color_rejected(bad):
    light = _roles("#ffffff")
    light["text"] = bad
    with pytest.raises(ThemeValidationError):
        validate_theme_pair(light, _roles("#000000"))


def test_load_theme_pair_file(tmp_path: Path):
    path = _write_theme(tmp_path / "theme.json", _roles("#fafafa"), _roles("hsl(0, 0%, 10%)"))
    pair = load_theme_pair(path)
    assert pair.light["render"] == "#fafafa"
    assert pair.dark["render"] == "hsl(0, 0%, 10%)"


def test_load_theme_pair_requires_both_variants(tmp_path: Path):
    path = tmp_path / "theme.json"
    path.write_text(json.dumps({"light": _roles("#ffffff")}), encoding="utf-8")
    with pytest.raises(ThemeValidationError):
        load_theme_pair(path)


def test_load_theme_pair_invalid_json(tmp_path: Path):
    path = tmp_path / "theme.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ThemeValidationError, match="Invalid JSON"):
        load_theme_pair(path)


class TestThemeService:
    @pytest.fixture
    def service(self, qapp, store, monkeypatch):
        service = ThemeService(qapp, store)
        monkeypatch.setattr(service, "system_prefers_dark", lambda: False)
        yield service
        qapp.setStyleSheet("")

    def test_apply_uses_system_scheme_without_override(self, qapp, service):
        assert service.apply() is False
        assert LIGHT_THEME["render"] in qapp.styleSheet()

    def test_toggle_persists_override(self, qapp, service, store):
        service.apply()
        seen: list[bool] = []
        service.theme_changed.connect(seen.append)

        assert service.toggle_dark_mode() is True
        assert service.has_user_override
        assert DARK_THEME["background"] in qapp.styleSheet()
        assert service.toggle_dark_mode() is False
        assert seen == [True, False]

    def test_stored_override_wins_over_system(self, qapp, store, monkeypatch):
        store.set("darkTheme", "true")
        service = ThemeService(qapp, store)
        monkeypatch.setattr(service, "system_prefers_dark", lambda: False)
        try:
            assert service.apply() is True
        finally:
            qapp.setStyleSheet("")

    def test_system_change_ignored_with_override(self, service, store, monkeypatch):
        store.set("darkTheme", False)
        service.apply()
        monkeypatch.setattr(service, "system_prefers_dark", lambda: True)
        service._on_system_scheme_changed(None)
        assert service.is_dark is False

    def test_system_change_followed_without_override(self, service, monkeypatch):
        service.apply()
        monkeypatch.setattr(service, "system_prefers_dark", lambda: True)
        service._on_system_scheme_changed(None)
        assert service.is_dark is True

    def test_invalid_user_theme_falls_back_to_builtin(self, qapp, store, tmp_path, caplog):
        light = _roles("#ffffff")
        light.pop("text")
        path = _write_theme(tmp_path / "theme.json", light, _roles("#000000"))
        with caplog.at_level(logging.WARNING):
            service = ThemeService(qapp, store, user_theme_path=path)
        assert service.theme == builtin_theme_pair()
        assert "THEME_INVALID" in caplog.text

    def test_valid_user_theme_is_used(self, qapp, store, tmp_path):
        path = _write_theme(tmp_path / "theme.json", _roles("#fefefe"), _roles("#010101"))
        service = ThemeService(qapp, store, user_theme_path=path)
        assert service.theme.light["background"] == "#fefefe"
