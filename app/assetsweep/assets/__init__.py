"""Image asset pipeline.

Scans image files, searches the project for references to them and
removes the ones nothing refers to.
"""

from assetsweep.assets.cleaner import AssetCleaner
from assetsweep.assets.manifest import AssetEntry, AssetManifest, AssetManifestManager
from assetsweep.assets.models import ImageAsset
from assetsweep.assets.operator import AssetOperator
from assetsweep.assets.scanner import AssetScanner
from assetsweep.assets.searcher import AssetReferenceSearcher

__all__ = [
    "AssetCleaner",
    "AssetEntry",
    "AssetManifest",
    "AssetManifestManager",
    "AssetOperator",
    "AssetReferenceSearcher",
    "AssetScanner",
    "ImageAsset",
]
