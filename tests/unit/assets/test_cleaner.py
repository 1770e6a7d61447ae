"""Unit tests for the asset cleaning pipeline."""

import json
import os
from pathlib import Path

import pytest

from assetsweep.assets.cleaner import AssetCleaner
from assetsweep.core.config import AssetConfig


def _cleaner(base: Path, backup: bool | None = None) -> AssetCleaner:
    return AssetCleaner.from_config(AssetConfig(), base, backup=backup)


class TestFindUnused:
    """Tests for AssetCleaner.find_unused."""

    def test_scan_skips_excluded(self, asset_project: Path) -> None:
        """Images under excluded directories are not scanned."""
        assets = _cleaner(asset_project).scan()

        assert [a.relative_path for a in assets] == [
            "public/images/hero.jpg",
            "public/images/logo.png",
            "public/images/unused.png",
            "resources/images/icon.svg",
        ]

    def test_protected_assets_are_never_unused(self, asset_project: Path) -> None:
        """logo.png has no reference but is protected."""
        unused = _cleaner(asset_project).find_unused()

        assert [a.relative_path for a in unused] == ["public/images/unused.png"]

    def test_statistics(self, asset_project: Path) -> None:
        """Statistics count every scanned asset and the unused ones."""
        stats = _cleaner(asset_project).get_statistics()

        unused_size = (asset_project / "public/images/unused.png").stat().st_size
        total_size = sum(
            (asset_project / rel).stat().st_size
            for rel in (
                "public/images/hero.jpg",
                "public/images/logo.png",
                "public/images/unused.png",
                "resources/images/icon.svg",
            )
        )
        assert stats.total == 4
        assert stats.unused == 1
        assert stats.used == 3
        assert stats.unused_size == unused_size
        assert stats.total_size == total_size


class TestManifestWorkflow:
    """Tests for the generate-review-clean workflow."""

    def test_generate_then_clean(self, asset_project: Path) -> None:
        """Cleaning from the manifest deletes and backs up the listed assets."""
        cleaner = _cleaner(asset_project)

        manifest = cleaner.generate_manifest()
        result = cleaner.clean_from_manifest()

        assert manifest.total_scanned == 4
        assert [entry.path for entry in manifest.assets] == ["public/images/unused.png"]
        assert result.deleted == 1
        assert result.backed_up == 1
        assert result.failed == []
        assert not (asset_project / "public/images/unused.png").exists()
        assert (asset_project / "public/images/hero.jpg").exists()
        backup_root = asset_project / ".asset-cleaner-backup"
        backups = list(backup_root.glob("*/public/images/unused.png"))
        assert len(backups) == 1

    def test_clean_without_manifest_does_nothing(self, asset_project: Path) -> None:
        """With no manifest there is nothing to delete."""
        result = _cleaner(asset_project).clean_from_manifest()

        assert result.deleted == 0
        assert result.failed == []

    def test_file_removed_since_manifest(self, asset_project: Path) -> None:
        """Entries whose file vanished are reported as failures."""
        cleaner = _cleaner(asset_project)
        cleaner.generate_manifest()
        (asset_project / "public/images/unused.png").unlink()

        result = cleaner.clean_from_manifest()

        assert result.deleted == 0
        assert result.failed == ["public/images/unused.png (file not found)"]

    def test_edited_manifest_cannot_reach_outside(
        self, asset_project: Path, tmp_path_factory: pytest.TempPathFactory
    ) -> None:
        """Entries pointing outside the project are refused, not deleted."""
        outside = tmp_path_factory.mktemp("outside") / "victim.png"
        outside.write_bytes(b"keep")
        cleaner = _cleaner(asset_project)
        cleaner.generate_manifest()
        manifest_path = asset_project / "unused-assets.json"
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
        template = data["assets"][0]
        escaping = os.path.relpath(outside, asset_project)
        data["assets"] = [
            {**template, "path": escaping},
            {**template, "path": str(outside)},
        ]
        manifest_path.write_text(json.dumps(data), encoding="utf-8")

        result = cleaner.clean_from_manifest()

        assert result.deleted == 0
        assert result.failed == [
            f"{escaping} (outside project root)",
            f"{outside} (outside project root)",
        ]
        assert outside.read_bytes() == b"keep"
        assert (asset_project / "public/images/unused.png").exists()


class TestCleanAll:
    """Tests for one-shot cleaning."""

    def test_dry_run_reports_scan_count(self, asset_project: Path) -> None:
        """A dry run counts candidates without deleting them."""
        result = _cleaner(asset_project).clean_all(dry_run=True)

        assert result.scanned == 4
        assert result.deleted == 1
        assert result.backed_up == 0
        assert (asset_project / "public/images/unused.png").exists()

    def test_backup_override(self, asset_project: Path) -> None:
        """backup=False skips the backup tree even when configured."""
        result = _cleaner(asset_project, backup=False).clean_all()

        assert result.deleted == 1
        assert result.backed_up == 0
        assert not (asset_project / ".asset-cleaner-backup").exists()
        assert not (asset_project / "public/images/unused.png").exists()


class TestFindReferences:
    """Tests for AssetCleaner.find_references."""

    def test_lists_referencing_files(self, asset_project: Path) -> None:
        """The welcome view references hero.jpg."""
        cleaner = _cleaner(asset_project)
        hero = next(a for a in cleaner.scan() if a.filename == "hero.jpg")

        assert cleaner.find_references(hero) == ["resources/views/welcome.blade.php"]
