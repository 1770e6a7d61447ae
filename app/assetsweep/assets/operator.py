"""Deletion of unused image assets."""

from assetsweep.assets.models import ImageAsset
from assetsweep.core.operator import BackingFile, DeletionOperator


class AssetOperator(DeletionOperator[ImageAsset]):
    """Backs up and deletes asset files, one file per asset."""

    missing_reason = "file not found"

    def identify(self, candidate: ImageAsset) -> str:
        return candidate.relative_path

    def backing_files(self, candidate: ImageAsset) -> list[BackingFile]:
        if not candidate.path.is_file():
            return []
        return [BackingFile(path=candidate.path, relative_path=candidate.relative_path)]

    def size_of(self, candidate: ImageAsset) -> int:
        return candidate.size
