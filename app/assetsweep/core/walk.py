"""Deterministic recursive directory walking.

Symlinked directories are never descended into, which rules out
symlink cycles. Symlinks to files are reported like regular files.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.warning("Cannot read directory %s: %s", error.filename, error.strerror)


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every file below a directory, recursively.

    Entries are visited in name order so repeated walks over an
    unchanged tree yield identical sequences. Missing roots yield
    nothing.

    Args:
        root: Directory to walk.

    Yields:
        Absolute paths of files below ``root``.
    """
    if not root.is_dir():
        logger.debug("Skipping missing directory: %s", root)
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        current = Path(dirpath)
        for name in sorted(filenames):
            yield current / name
