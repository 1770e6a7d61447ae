"""Abstract base class for candidate scanners.

This module defines the interface both pipelines implement: discover
candidates on disk and decide which of them are protected.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Generic, TypeVar

from assetsweep.core.glob import matches_any
from assetsweep.core.paths import relative_to_base

C = TypeVar("C")


class CandidateScanner(ABC, Generic[C]):
    """Abstract base class for all candidate scanners.

    Scanners walk the configured roots and return candidates in a
    deterministic order. Protection is decided here but applied by the
    cleaner, after reference search.

    Example:
        >>> scanner = AssetScanner(base_path=root, ...)
        >>> for asset in scanner.scan():
        ...     if not scanner.is_protected(asset):
        ...         print(asset.relative_path)

    Args:
        base_path: Project root directory.
        exclude_patterns: Globs over root-relative paths to skip.
        protected_patterns: Globs marking candidates that are never unused.
    """

    def __init__(
        self,
        *,
        base_path: Path,
        exclude_patterns: Sequence[str],
        protected_patterns: Sequence[str],
    ) -> None:
        self._base_path = base_path
        self._exclude_patterns = tuple(exclude_patterns)
        self._protected_patterns = tuple(protected_patterns)

    @property
    def base_path(self) -> Path:
        """Project root directory."""
        return self._base_path

    @abstractmethod
    def scan(self) -> list[C]:
        """Scan the configured roots for candidates.

        Returns:
            Candidates in walk order. Missing roots contribute nothing.
        """

    @abstractmethod
    def protection_key(self, candidate: C) -> str:
        """Return the string matched against protected patterns."""

    def is_protected(self, candidate: C) -> bool:
        """Check if a candidate matches any protected pattern."""
        return matches_any(self.protection_key(candidate), self._protected_patterns)

    def is_excluded(self, path: Path) -> bool:
        """Check if a file matches any exclude pattern."""
        return matches_any(relative_to_base(path, self._base_path), self._exclude_patterns)
