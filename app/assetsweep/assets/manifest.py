"""Manifest of unused image assets."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from assetsweep.assets.models import ImageAsset
from assetsweep.core.manifest import ManifestBase, ManifestInstructions, ManifestManager
from assetsweep.utils.sizes import human_file_size

ASSET_INSTRUCTIONS = ManifestInstructions(
    review="Review the assets below and remove any that are actually used.",
    delete_entry='Remove the entry from the "assets" array to keep the file.',
    clean="Run `assetsweep assets clean` to delete remaining assets.",
)


class AssetEntry(BaseModel):
    """One unused asset as stored in the manifest."""

    model_config = ConfigDict(extra="ignore")

    path: str
    filename: str
    extension: str
    size: Annotated[int, Field(ge=0)]
    size_human: str = ""
    modified_at: str | None = None


class AssetManifest(ManifestBase):
    """Manifest file listing unused image assets."""

    assets: Annotated[list[AssetEntry], Field(default_factory=list)]


class AssetManifestManager(ManifestManager[ImageAsset, AssetManifest]):
    """Reads and writes the asset manifest."""

    model = AssetManifest

    def build(self, candidates: Sequence[ImageAsset], total_scanned: int) -> AssetManifest:
        total_size = sum(asset.size for asset in candidates)
        return AssetManifest(
            generated_at=datetime.now(UTC).astimezone(),
            total_scanned=total_scanned,
            total_unused=len(candidates),
            total_size=total_size,
            total_size_human=human_file_size(total_size),
            instructions=ASSET_INSTRUCTIONS,
            assets=[AssetEntry.model_validate(a.to_manifest_entry()) for a in candidates],
        )

    def to_candidates(self, manifest: AssetManifest) -> list[ImageAsset]:
        return [
            ImageAsset.from_manifest(entry.model_dump(), self._base_path)
            for entry in manifest.assets
        ]
