"""Full-text reference search shared by both pipelines.

The searcher enumerates the searchable files of a project and tests
candidates against their raw text with case-insensitive substring
matching. Classification builds a single corpus of all file contents
(existence is all that matters); reporting checks every file on its own
so the referencing files can be listed.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Generic, TypeVar

from assetsweep.core.glob import matches_any
from assetsweep.core.paths import relative_to_base
from assetsweep.core.walk import iter_files

logger = logging.getLogger(__name__)

C = TypeVar("C")


def unique_patterns(patterns: Iterable[str]) -> list[str]:
    """Drop empty and duplicate patterns, keeping first-occurrence order."""
    return list(dict.fromkeys(p for p in patterns if p))


class ReferenceSearcher(ABC, Generic[C]):
    """Abstract base class for candidate reference searchers.

    Subclasses only decide which strings count as a reference to a
    candidate; file enumeration and matching live here.

    Args:
        base_path: Project root directory.
        search_paths: Directories (relative to the root) searched recursively.
        search_extensions: Accepted file suffixes, without the leading dot.
            Compound suffixes such as "blade.php" match the end of the name.
        exclude_patterns: Globs over root-relative paths to skip.
        extra_files: Individual root-relative files searched in addition.
    """

    def __init__(
        self,
        *,
        base_path: Path,
        search_paths: Sequence[str],
        search_extensions: Sequence[str],
        exclude_patterns: Sequence[str],
        extra_files: Sequence[str] = (),
    ) -> None:
        self._base_path = base_path
        self._search_paths = tuple(search_paths)
        self._suffixes = tuple(f".{ext.lower().lstrip('.')}" for ext in search_extensions)
        self._exclude_patterns = tuple(exclude_patterns)
        self._extra_files = tuple(extra_files)

    @abstractmethod
    def search_patterns(self, candidate: C) -> list[str]:
        """Return the deduplicated strings that count as a reference."""

    def find_unused(self, candidates: Sequence[C]) -> list[C]:
        """Return the candidates with no reference anywhere in the project.

        Args:
            candidates: Candidates to classify.

        Returns:
            The unreferenced subsequence, in input order.
        """
        corpus = "\n".join(self._read_all())
        return [c for c in candidates if not self._references(corpus, c)]

    def find_references(self, candidate: C) -> list[str]:
        """List every searchable file that references a candidate.

        Args:
            candidate: Candidate to look up.

        Returns:
            Root-relative paths of the referencing files.
        """
        references: list[str] = []
        for path in self.searchable_files():
            content = self._read(path)
            if content is None:
                continue
            if self._references(content.lower(), candidate):
                references.append(relative_to_base(path, self._base_path))
        return references

    def searchable_files(self) -> list[Path]:
        """Enumerate the files searched for references.

        Returns:
            Files under the search paths that have an accepted suffix and
            are not excluded, followed by the existing extra files.
        """
        files: list[Path] = []

        for search_path in self._search_paths:
            for path in iter_files(self._base_path / search_path):
                if not path.name.lower().endswith(self._suffixes):
                    continue
                if self._is_excluded(path):
                    continue
                files.append(path)

        for extra in self._extra_files:
            path = self._base_path / extra
            if path.is_file():
                files.append(path)

        # Overlapping search paths must not list a file twice
        return list(dict.fromkeys(files))

    def _read_all(self) -> list[str]:
        """Read every searchable file once, lowercased."""
        contents: list[str] = []
        for path in self.searchable_files():
            content = self._read(path)
            if content is not None:
                contents.append(content.lower())
        return contents

    def _references(self, content_lower: str, candidate: C) -> bool:
        """Check lowercased content against a candidate's patterns."""
        return any(pattern.lower() in content_lower for pattern in self.search_patterns(candidate))

    def _is_excluded(self, path: Path) -> bool:
        return matches_any(relative_to_base(path, self._base_path), self._exclude_patterns)

    @staticmethod
    def _read(path: Path) -> str | None:
        """Read a file as text, returning None when it cannot be read."""
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Skipping unreadable file %s: %s", path, e)
            return None
