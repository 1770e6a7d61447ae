"""Unit tests for the asset manifest."""

import json
from collections.abc import Callable
from pathlib import Path

from assetsweep.assets.manifest import AssetManifestManager
from assetsweep.assets.models import ImageAsset


def _manager(base: Path) -> AssetManifestManager:
    return AssetManifestManager(manifest_path="unused-assets.json", base_path=base)


class TestAssetManifest:
    """Tests for AssetManifestManager."""

    def test_generate_writes_summary(self, tmp_path: Path, write: Callable[..., Path]) -> None:
        """The manifest records totals, instructions and one entry per asset."""
        assets = [
            ImageAsset.from_path(write("public/a.png", b"x" * 1024), tmp_path),
            ImageAsset.from_path(write("public/b.jpg", b"x" * 1024), tmp_path),
        ]

        _manager(tmp_path).generate(assets, total_scanned=5)

        data = json.loads((tmp_path / "unused-assets.json").read_text(encoding="utf-8"))
        assert data["total_scanned"] == 5
        assert data["total_unused"] == 2
        assert data["total_size"] == 2048
        assert data["total_size_human"] == "2 KB"
        assert "assetsweep assets clean" in data["instructions"]["clean"]
        assert [entry["path"] for entry in data["assets"]] == ["public/a.png", "public/b.jpg"]
        assert data["assets"][0]["size_human"] == "1 KB"

    def test_round_trip(self, tmp_path: Path, write: Callable[..., Path]) -> None:
        """Candidates rebuilt from the manifest match the written ones."""
        asset = ImageAsset.from_path(write("public/images/a b.png", b"123"), tmp_path)
        manager = _manager(tmp_path)
        manager.generate([asset], total_scanned=1)

        (loaded,) = manager.get_candidates()

        assert loaded.path == asset.path
        assert loaded.relative_path == "public/images/a b.png"
        assert loaded.filename == "a b.png"
        assert loaded.extension == "png"
        assert loaded.size == 3
        assert loaded.modified_at == asset.modified_at

    def test_edited_manifest_drops_entries(
        self, tmp_path: Path, write: Callable[..., Path]
    ) -> None:
        """Entries removed by the user are no longer candidates."""
        assets = [
            ImageAsset.from_path(write("public/a.png", b"x"), tmp_path),
            ImageAsset.from_path(write("public/b.png", b"x"), tmp_path),
        ]
        manager = _manager(tmp_path)
        manager.generate(assets)

        path = tmp_path / "unused-assets.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        data["assets"] = data["assets"][1:]
        path.write_text(json.dumps(data), encoding="utf-8")

        assert [a.relative_path for a in manager.get_candidates()] == ["public/b.png"]

    def test_empty_manifest(self, tmp_path: Path) -> None:
        """A manifest without entries yields no candidates."""
        manager = _manager(tmp_path)
        manager.generate([])

        assert manager.exists()
        assert manager.get_candidates() == []
