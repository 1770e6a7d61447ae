"""Image asset scanner.

Walks the configured scan roots and reports every image file that is
not excluded.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from assetsweep.assets.models import ImageAsset
from assetsweep.core.scanner import CandidateScanner
from assetsweep.core.walk import iter_files

logger = logging.getLogger(__name__)


class AssetScanner(CandidateScanner[ImageAsset]):
    """Scans project directories for image files.

    Args:
        base_path: Project root directory.
        scan_paths: Directories (relative to the root) walked recursively.
        image_extensions: Extensions treated as images, compared lowercase.
        exclude_patterns: Globs over root-relative paths to skip.
        protected_patterns: Globs over root-relative paths never reported unused.
    """

    def __init__(
        self,
        *,
        base_path: Path,
        scan_paths: Sequence[str],
        image_extensions: Sequence[str],
        exclude_patterns: Sequence[str],
        protected_patterns: Sequence[str],
    ) -> None:
        super().__init__(
            base_path=base_path,
            exclude_patterns=exclude_patterns,
            protected_patterns=protected_patterns,
        )
        self._scan_paths = tuple(scan_paths)
        self._image_extensions = frozenset(ext.lower().lstrip(".") for ext in image_extensions)

    def scan(self) -> list[ImageAsset]:
        """Scan all scan roots for image assets.

        Returns:
            Assets in walk order, roots in configuration order.
        """
        assets: list[ImageAsset] = []

        for scan_path in self._scan_paths:
            root = self._base_path / scan_path
            for path in iter_files(root):
                if not self._is_image(path):
                    continue
                if self.is_excluded(path):
                    logger.debug("Excluded asset: %s", path)
                    continue
                assets.append(ImageAsset.from_path(path, self._base_path))

        return assets

    def protection_key(self, candidate: ImageAsset) -> str:
        return candidate.relative_path

    def _is_image(self, path: Path) -> bool:
        return path.suffix.lower().lstrip(".") in self._image_extensions
