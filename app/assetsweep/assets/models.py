"""Image asset domain model.

This module defines the candidate type of the asset pipeline and its
conversion to and from manifest entries.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from assetsweep.core.manifest import format_modified_at, parse_modified_at
from assetsweep.core.paths import relative_to_base, resolve_relative
from assetsweep.utils.sizes import human_file_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImageAsset:
    """An image file that may or may not be referenced.

    Attributes:
        path: Absolute file path.
        relative_path: Path relative to the project root, posix style.
        filename: Base name including the extension.
        extension: Lowercase extension without the dot.
        size: Size in bytes at scan time.
        modified_at: Modification time as epoch seconds, if known.
    """

    path: Path
    relative_path: str
    filename: str
    extension: str
    size: int
    modified_at: int | None = None

    @classmethod
    def from_path(cls, path: Path, base_path: Path) -> "ImageAsset":
        """Create an asset from a file on disk.

        Args:
            path: Absolute path of an existing file.
            base_path: Project root directory.
        """
        try:
            stat = path.stat()
            size = stat.st_size
            modified_at: int | None = int(stat.st_mtime)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            size = 0
            modified_at = None

        return cls(
            path=path,
            relative_path=relative_to_base(path, base_path),
            filename=path.name,
            extension=path.suffix.lower().lstrip("."),
            size=size,
            modified_at=modified_at,
        )

    @classmethod
    def from_manifest(cls, entry: Mapping[str, Any], base_path: Path) -> "ImageAsset":
        """Rebuild an asset from a manifest entry.

        Args:
            entry: Manifest entry with path, filename, extension, size
                and modified_at keys.
            base_path: Project root the relative path is joined to.
        """
        relative_path = str(entry["path"]).replace("\\", "/")
        return cls(
            path=resolve_relative(relative_path, base_path),
            relative_path=relative_path,
            filename=entry["filename"],
            extension=entry["extension"],
            size=entry["size"],
            modified_at=parse_modified_at(entry.get("modified_at")),
        )

    @property
    def human_size(self) -> str:
        return human_file_size(self.size)

    def to_manifest_entry(self) -> dict[str, Any]:
        """Serialize the asset as a manifest entry."""
        return {
            "path": self.relative_path,
            "filename": self.filename,
            "extension": self.extension,
            "size": self.size,
            "size_human": self.human_size,
            "modified_at": format_modified_at(self.modified_at),
        }
