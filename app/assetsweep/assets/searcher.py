"""Reference search for image assets."""

import re
from collections.abc import Sequence
from pathlib import Path, PurePath
from urllib.parse import quote

from assetsweep.assets.models import ImageAsset
from assetsweep.core.searcher import ReferenceSearcher, unique_patterns
from assetsweep.patterns.base import PatternGenerator

_PUBLIC_PREFIX = re.compile(r"^public/")


class AssetReferenceSearcher(ReferenceSearcher[ImageAsset]):
    """Finds references to image assets in the project sources.

    An asset counts as referenced when any of its search patterns occurs
    in a searchable file, compared case-insensitively.

    Args:
        base_path: Project root directory.
        search_paths: Directories searched recursively.
        search_extensions: Accepted file suffixes.
        exclude_patterns: Globs over root-relative paths to skip.
        root_config_files: Extra files such as ``tailwind.config.js``.
        pattern_generators: Enabled generators contributing extra patterns.
    """

    def __init__(
        self,
        *,
        base_path: Path,
        search_paths: Sequence[str],
        search_extensions: Sequence[str],
        exclude_patterns: Sequence[str],
        root_config_files: Sequence[str] = (),
        pattern_generators: Sequence[PatternGenerator] = (),
    ) -> None:
        super().__init__(
            base_path=base_path,
            search_paths=search_paths,
            search_extensions=search_extensions,
            exclude_patterns=exclude_patterns,
            extra_files=root_config_files,
        )
        self._pattern_generators = tuple(pattern_generators)

    def search_patterns(self, candidate: ImageAsset) -> list[str]:
        """Build the search strings for an asset.

        Covers the full relative path, the path as passed to ``asset()``
        (without ``public/``), the filename with and without extension,
        the percent-encoded filename and any generator patterns.
        """
        relative = candidate.relative_path.replace("\\", "/")
        patterns = [
            relative,
            _PUBLIC_PREFIX.sub("", relative),
            candidate.filename,
            PurePath(candidate.filename).stem,
            quote(candidate.filename, safe=""),
        ]

        for generator in self._pattern_generators:
            if generator.supports(candidate):
                patterns.extend(generator.generate(candidate))

        return unique_patterns(patterns)
