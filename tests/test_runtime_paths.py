from __future__ import annotations

from pathlib import Path

from lifecycleview import runtime_paths


def test_source_package_root_points_to_repo_package() -> None:
    root = runtime_paths.package_root()
    assert root.name == "lifecycleview"
    assert (root / "ui").exists()


def test_translations_root_contains_tables() -> None:
    root = runtime_paths.translations_root()
    assert root.name == "locales"
    assert any(root.glob("*.yml"))


def test_frozen_prefers_meipass_package_dir(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    package_root = bundle_root / "lifecycleview"
    package_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == package_root
    assert runtime_paths.asset_path("icon.png") == package_root / "ui" / "assets" / "icon.png"


def test_frozen_falls_back_to_meipass_when_package_missing(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    bundle_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == bundle_root
