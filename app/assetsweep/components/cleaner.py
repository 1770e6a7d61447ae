"""Blade component cleaning pipeline."""

from pathlib import Path

from assetsweep.components.manifest import ComponentManifest, ComponentManifestManager
from assetsweep.components.models import BladeComponent
from assetsweep.components.operator import ComponentOperator
from assetsweep.components.scanner import ComponentScanner
from assetsweep.components.searcher import ComponentReferenceSearcher
from assetsweep.core.cleaner import Cleaner
from assetsweep.core.config import ComponentConfig


class BladeCleaner(Cleaner[BladeComponent, ComponentManifest]):
    """Finds and removes unused Blade components."""

    @classmethod
    def from_config(
        cls,
        config: ComponentConfig,
        base_path: Path,
        backup: bool | None = None,
    ) -> "BladeCleaner":
        """Wire a component cleaner from configuration.

        Args:
            config: Component pipeline settings.
            base_path: Project root directory.
            backup: Overrides ``config.backup_before_delete`` when not None.

        Returns:
            Configured BladeCleaner.
        """
        backup_before_delete = config.backup_before_delete if backup is None else backup

        return cls(
            scanner=ComponentScanner(
                base_path=base_path,
                anonymous_paths=config.anonymous_paths,
                class_paths=config.class_paths,
                exclude_patterns=config.exclude_patterns,
                protected_patterns=config.protected_patterns,
                views_path=config.views_path,
                class_namespace=config.class_namespace,
                component_base_classes=config.component_base_classes,
            ),
            searcher=ComponentReferenceSearcher(
                base_path=base_path,
                search_paths=config.search_paths,
                search_extensions=config.search_extensions,
                exclude_patterns=config.exclude_patterns,
                views_path=config.views_path,
            ),
            manifest=ComponentManifestManager(
                manifest_path=config.manifest_path,
                base_path=base_path,
            ),
            operator=ComponentOperator(
                base_path=base_path,
                backup_before_delete=backup_before_delete,
                backup_path=config.backup_path,
            ),
        )
