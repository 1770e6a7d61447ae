"""Blade component pipeline.

Scans anonymous and class-based Blade components, searches templates
and PHP code for references to them and removes the unused ones.
"""

from assetsweep.components.cleaner import BladeCleaner
from assetsweep.components.manifest import (
    ComponentEntry,
    ComponentManifest,
    ComponentManifestManager,
)
from assetsweep.components.models import BladeComponent
from assetsweep.components.operator import ComponentOperator
from assetsweep.components.scanner import ComponentScanner, parse_php_class
from assetsweep.components.searcher import ComponentReferenceSearcher

__all__ = [
    "BladeCleaner",
    "BladeComponent",
    "ComponentEntry",
    "ComponentManifest",
    "ComponentManifestManager",
    "ComponentOperator",
    "ComponentReferenceSearcher",
    "ComponentScanner",
    "parse_php_class",
]
