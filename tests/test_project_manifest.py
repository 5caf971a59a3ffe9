"""Tests for referee.project_manifest."""

from __future__ import annotations

from pathlib import Path

import pytest

from referee.project_manifest import ProjectManifestBuilder, detect_file_type


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_build_declares_xcode_file_types(tmp_path: Path) -> None:
    root = tmp_path / "App"
    _write(root / "App" / "Base.lproj" / "Main.storyboard", "<document/>")
    _write(root / "App" / "AppDelegate.swift", "import UIKit\n")
    _write(root / "App" / "Cells" / "PhotoCell.xib", "<document/>")
    _write(root / "App" / "Info.plist", "<plist/>")
    _write(root / "README", "notes\n")

    manifest = ProjectManifestBuilder().build(root)
    types = {entry.path: entry.file_type for entry in manifest.files}

    assert manifest.root == root.resolve()
    assert types["App/Base.lproj/Main.storyboard"] == "file.storyboard"
    assert types["App/AppDelegate.swift"] == "sourcecode.swift"
    assert types["App/Cells/PhotoCell.xib"] == "file.xib"
    assert types["App/Info.plist"] == "text.plist.xml"
    assert types["README"] == "file"


def test_build_skips_dependency_and_bundle_directories(tmp_path: Path) -> None:
    root = tmp_path / "App"
    _write(root / "App" / "Main.storyboard")
    _write(root / "Pods" / "Lib" / "Lib.storyboard")
    _write(root / "DerivedData" / "Cache.storyboard")
    _write(root / "App.xcodeproj" / "project.pbxproj")
    _write(root / "App" / "Assets.xcassets" / "Contents.json")

    paths = [entry.path for entry in ProjectManifestBuilder().build(root).files]

    assert paths == ["App/Main.storyboard"]


def test_build_orders_files_deterministically(tmp_path: Path) -> None:
    root = tmp_path / "App"
    for name in ("Zeta.storyboard", "Alpha.storyboard", "Mid.storyboard"):
        _write(root / name)

    paths = [entry.path for entry in ProjectManifestBuilder().build(root).files]

    assert paths == ["Alpha.storyboard", "Mid.storyboard", "Zeta.storyboard"]


def test_build_respects_gitignore_and_exclude_paths(tmp_path: Path) -> None:
    root = tmp_path / "App"
    _write(root / ".gitignore", "Generated/\n*.orig\n")
    _write(root / "App" / "Main.storyboard")
    _write(root / "Generated" / "Out.storyboard")
    _write(root / "App" / "Main.storyboard.orig")
    _write(root / "Vendor" / "Widget.storyboard")

    manifest = ProjectManifestBuilder().build(root, exclude_paths=["Vendor/"])
    paths = {entry.path for entry in manifest.files}

    assert "App/Main.storyboard" in paths
    assert "Generated/Out.storyboard" not in paths
    assert "App/Main.storyboard.orig" not in paths
    assert "Vendor/Widget.storyboard" not in paths


def test_build_accepts_xcodeproj_path(tmp_path: Path) -> None:
    root = tmp_path / "App"
    _write(root / "App.xcodeproj" / "project.pbxproj")
    _write(root / "Main.storyboard")

    manifest = ProjectManifestBuilder().build(root / "App.xcodeproj")

    assert manifest.root == root.resolve()
    assert [entry.path for entry in manifest.files] == ["Main.storyboard"]


def test_build_rejects_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(FileNotFoundError) as excinfo:
        ProjectManifestBuilder().build(missing)

    assert str(missing) in str(excinfo.value)


def test_build_rejects_file_path(tmp_path: Path) -> None:
    target = tmp_path / "Main.storyboard"
    _write(target)

    with pytest.raises(NotADirectoryError):
        ProjectManifestBuilder().build(target)


def test_detect_file_type_is_case_insensitive() -> None:
    assert detect_file_type(Path("Main.STORYBOARD")) == "file.storyboard"
