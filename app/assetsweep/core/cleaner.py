"""Orchestration of scan, search, manifest and deletion.

A cleaner composes the four services of a pipeline into its public
operations. It adds no detection logic of its own apart from rejecting
protected candidates after the reference search.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Generic, TypeVar

from assetsweep.core.manifest import ManifestBase, ManifestManager
from assetsweep.core.operator import DeletionOperator, DeletionResult
from assetsweep.core.scanner import CandidateScanner
from assetsweep.core.searcher import ReferenceSearcher
from assetsweep.utils.sizes import human_file_size

logger = logging.getLogger(__name__)

C = TypeVar("C")
M = TypeVar("M", bound=ManifestBase)


@dataclass(frozen=True, slots=True)
class Statistics:
    """Counts and byte totals for one scan.

    Attributes:
        total: Candidates found by the scanner.
        unused: Unprotected candidates without any reference.
        used: Remaining candidates (referenced or protected).
        total_size: Combined size of all candidates.
        unused_size: Combined size of the unused candidates.
    """

    total: int
    unused: int
    used: int
    total_size: int
    unused_size: int

    @property
    def total_size_human(self) -> str:
        return human_file_size(self.total_size)

    @property
    def unused_size_human(self) -> str:
        return human_file_size(self.unused_size)


class Cleaner(Generic[C, M]):
    """Public operations of a cleaning pipeline.

    Args:
        scanner: Candidate discovery and protection policy.
        searcher: Reference search over the project files.
        manifest: Manifest persistence.
        operator: Backup and deletion.
    """

    def __init__(
        self,
        *,
        scanner: CandidateScanner[C],
        searcher: ReferenceSearcher[C],
        manifest: ManifestManager[C, M],
        operator: DeletionOperator[C],
    ) -> None:
        self._scanner = scanner
        self._searcher = searcher
        self._manifest = manifest
        self._operator = operator

    @property
    def manifest(self) -> ManifestManager[C, M]:
        """The pipeline's manifest manager."""
        return self._manifest

    @property
    def backup_root(self) -> Path:
        """Directory holding the timestamped backup folders."""
        return self._operator.backup_root

    def scan(self) -> list[C]:
        """Scan for all candidates."""
        return self._scanner.scan()

    def find_unused(self, candidates: Sequence[C] | None = None) -> list[C]:
        """Find unreferenced candidates, excluding protected ones.

        Args:
            candidates: Candidates to classify. Scans when omitted.

        Returns:
            Unused, unprotected candidates in scan order.
        """
        if candidates is None:
            candidates = self.scan()
        unused = self._searcher.find_unused(candidates)
        return [c for c in unused if not self._scanner.is_protected(c)]

    def generate_manifest(self) -> M:
        """Scan, classify and write the manifest of unused candidates.

        Returns:
            The manifest that was written.

        Raises:
            ManifestWriteError: If the manifest cannot be written.
        """
        candidates = self.scan()
        unused = self.find_unused(candidates)
        logger.debug("Found %d unused of %d candidates", len(unused), len(candidates))
        return self._manifest.generate(unused, len(candidates))

    def clean_from_manifest(self, dry_run: bool = False) -> DeletionResult:
        """Delete the candidates still listed in the manifest."""
        return self._operator.delete(self._manifest.get_candidates(), dry_run=dry_run)

    def clean_all(self, dry_run: bool = False) -> DeletionResult:
        """Find and delete unused candidates in one pass, without a manifest.

        Returns:
            DeletionResult with ``scanned`` set to the number of candidates.
        """
        candidates = self.scan()
        unused = self.find_unused(candidates)
        result = self._operator.delete(unused, dry_run=dry_run)
        return replace(result, scanned=len(candidates))

    def find_references(self, candidate: C) -> list[str]:
        """List the project files that reference a candidate."""
        return self._searcher.find_references(candidate)

    def get_statistics(self) -> Statistics:
        """Compute counts and sizes for the current project state."""
        candidates = self.scan()
        unused = self.find_unused(candidates)
        size_of = self._operator.size_of
        return Statistics(
            total=len(candidates),
            unused=len(unused),
            used=len(candidates) - len(unused),
            total_size=sum(size_of(c) for c in candidates),
            unused_size=sum(size_of(c) for c in unused),
        )
