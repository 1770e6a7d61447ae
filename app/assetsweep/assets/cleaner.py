"""Image asset cleaning pipeline."""

import logging
from pathlib import Path

from assetsweep.assets.manifest import AssetManifest, AssetManifestManager
from assetsweep.assets.models import ImageAsset
from assetsweep.assets.operator import AssetOperator
from assetsweep.assets.scanner import AssetScanner
from assetsweep.assets.searcher import AssetReferenceSearcher
from assetsweep.core.cleaner import Cleaner
from assetsweep.core.config import AssetConfig
from assetsweep.patterns import resolve_pattern_generators

logger = logging.getLogger(__name__)


class AssetCleaner(Cleaner[ImageAsset, AssetManifest]):
    """Finds and removes unused image assets."""

    @classmethod
    def from_config(
        cls,
        config: AssetConfig,
        base_path: Path,
        backup: bool | None = None,
    ) -> "AssetCleaner":
        """Wire an asset cleaner from configuration.

        Args:
            config: Asset pipeline settings.
            base_path: Project root directory.
            backup: Overrides ``config.backup_before_delete`` when not None.

        Returns:
            Configured AssetCleaner.
        """
        backup_before_delete = config.backup_before_delete if backup is None else backup
        generators = resolve_pattern_generators(config.pattern_generators, base_path)
        logger.debug("Asset pattern generators: %s", [g.key for g in generators])

        return cls(
            scanner=AssetScanner(
                base_path=base_path,
                scan_paths=config.scan_paths,
                image_extensions=config.image_extensions,
                exclude_patterns=config.exclude_patterns,
                protected_patterns=config.protected_patterns,
            ),
            searcher=AssetReferenceSearcher(
                base_path=base_path,
                search_paths=config.search_paths,
                search_extensions=config.search_extensions,
                exclude_patterns=config.exclude_patterns,
                root_config_files=config.root_config_files,
                pattern_generators=generators,
            ),
            manifest=AssetManifestManager(
                manifest_path=config.manifest_path,
                base_path=base_path,
            ),
            operator=AssetOperator(
                base_path=base_path,
                backup_before_delete=backup_before_delete,
                backup_path=config.backup_path,
            ),
        )
