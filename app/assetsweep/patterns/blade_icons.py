"""Search patterns for Blade UI Kit icons.

Blade Icons renders SVG files through components such as
``<x-icon-arrow-left/>`` or ``@svg('arrow-left')``, so an SVG named
``ArrowLeft.svg`` is referenced by its kebab-case name.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from assetsweep.patterns.base import PatternGenerator

if TYPE_CHECKING:
    from assetsweep.assets.models import ImageAsset

logger = logging.getLogger(__name__)

_PACKAGE_NAME = "blade-ui-kit/blade-icons"


def to_kebab_case(value: str) -> str:
    """Convert PascalCase, camelCase, snake_case or spaced text to kebab-case.

    Args:
        value: Text to convert.

    Returns:
        Lowercase hyphen-separated text without leading/trailing hyphens.
    """
    value = value.replace("_", "-").replace(" ", "-")
    value = re.sub(r"([a-z])([A-Z])", r"\1-\2", value)
    value = re.sub(r"-+", "-", value.lower())
    return value.strip("-")


class BladeIconsPatternGenerator(PatternGenerator):
    """Adds the kebab-case icon name for SVG assets."""

    key = "blade_icons"

    def supports(self, asset: ImageAsset) -> bool:
        """Only SVG files are rendered as icons."""
        return PurePath(asset.filename).suffix.lower() == ".svg"

    def generate(self, asset: ImageAsset) -> list[str]:
        """Generate the kebab-case icon name when it differs from the stem.

        Already kebab-case or single-word lowercase stems are matched by
        the default filename-stem pattern, so nothing is added for them.
        """
        stem = PurePath(asset.filename).stem
        kebab = to_kebab_case(stem)

        if kebab not in (stem, stem.lower()):
            return [kebab]
        return []

    @classmethod
    def is_available(cls, base_path: Path) -> bool:
        """Detect Blade Icons through vendor/ or the composer files."""
        if (base_path / "vendor" / _PACKAGE_NAME).is_dir():
            return True

        for name in ("composer.json", "composer.lock"):
            composer_file = base_path / name
            try:
                if _PACKAGE_NAME in composer_file.read_text(encoding="utf-8"):
                    return True
            except FileNotFoundError:
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Cannot read %s: %s", composer_file, e)

        return False
