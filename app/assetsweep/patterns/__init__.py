"""Pluggable search pattern generators.

Generators are registered explicitly by configuration key and resolved
once when a searcher is built.
"""

import logging
from pathlib import Path

from assetsweep.core.config import GeneratorSetting
from assetsweep.patterns.base import PatternGenerator
from assetsweep.patterns.blade_icons import BladeIconsPatternGenerator

logger = logging.getLogger(__name__)

# Registry of known generators, keyed by configuration key
PATTERN_GENERATORS: dict[str, type[PatternGenerator]] = {
    BladeIconsPatternGenerator.key: BladeIconsPatternGenerator,
}


def resolve_pattern_generators(
    settings: dict[str, GeneratorSetting],
    base_path: Path,
) -> list[PatternGenerator]:
    """Instantiate the generators enabled by configuration.

    Each registered generator is looked up in ``settings``; a missing key
    behaves like "auto", which enables the generator only when
    ``is_available`` detects its package in the project. Unknown keys
    are ignored with a warning.

    Args:
        settings: Generator key to True, False or "auto".
        base_path: Project root directory.

    Returns:
        Enabled generator instances, in registry order.
    """
    for key in settings:
        if key not in PATTERN_GENERATORS:
            logger.warning("Unknown pattern generator in config: %s", key)

    generators: list[PatternGenerator] = []
    for key, generator_class in PATTERN_GENERATORS.items():
        setting = settings.get(key, "auto")
        if setting == "auto":
            enabled = generator_class.is_available(base_path)
        else:
            enabled = setting is True

        logger.debug("Pattern generator %s: %s", key, "enabled" if enabled else "disabled")
        if enabled:
            generators.append(generator_class())

    return generators


__all__ = [
    "PATTERN_GENERATORS",
    "BladeIconsPatternGenerator",
    "PatternGenerator",
    "resolve_pattern_generators",
]
