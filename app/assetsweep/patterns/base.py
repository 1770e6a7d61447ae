"""Abstract base class for search pattern generators.

Pattern generators contribute extra search strings for assets that
third-party packages reference by a derived name rather than by path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assetsweep.assets.models import ImageAsset


class PatternGenerator(ABC):
    """Abstract base class for all pattern generators.

    Example:
        >>> generator = BladeIconsPatternGenerator()
        >>> if generator.supports(asset):
        ...     patterns.extend(generator.generate(asset))
    """

    #: Configuration key enabling this generator.
    key: str = ""

    @abstractmethod
    def supports(self, asset: ImageAsset) -> bool:
        """Check if this generator applies to the given asset."""

    @abstractmethod
    def generate(self, asset: ImageAsset) -> list[str]:
        """Generate additional search patterns for the asset.

        Returns:
            Extra search strings, possibly empty.
        """

    @classmethod
    @abstractmethod
    def is_available(cls, base_path: Path) -> bool:
        """Check if the package this generator supports is installed in a project.

        Args:
            base_path: Project root directory.

        Returns:
            True if the generator should be enabled in "auto" mode.
        """
