"""Backup and deletion of unused candidates.

Handles dry-run reporting, timestamped backups that mirror the project
layout, file removal and pruning of directories left empty. Failures are
isolated per candidate and collected in the result; a candidate whose
backup fails is never deleted, and nothing outside the project root is
ever touched.
"""

import logging
import shutil
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

C = TypeVar("C")

# Backup folder name format, one folder per delete() call
BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%d_%H%M%S"


@dataclass(frozen=True, slots=True)
class BackingFile:
    """A file on disk that belongs to a candidate.

    Attributes:
        path: Absolute file path.
        relative_path: Path relative to the project root, used for backups.
    """

    path: Path
    relative_path: str


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Outcome of a delete() call.

    Attributes:
        deleted: Candidates deleted (or that would be, in dry-run mode).
        backed_up: Files copied to the backup tree.
        failed: One "<identifier> (<reason>)" message per failed candidate.
        total_size: Combined recorded size of the deleted candidates.
        scanned: Candidates found by the scan (one-shot cleaning only).
    """

    deleted: int = 0
    backed_up: int = 0
    failed: list[str] = field(default_factory=list)
    total_size: int = 0
    scanned: int | None = None

    @property
    def has_failures(self) -> bool:
        """Whether any candidate could not be deleted."""
        return bool(self.failed)


class DeletionOperator(ABC, Generic[C]):
    """Abstract base class for candidate deleters.

    Args:
        base_path: Project root directory. Nothing outside it, the root
            itself or its direct children is ever pruned.
        backup_before_delete: Copy each file to the backup tree first.
        backup_path: Backup tree root, relative to the project root.
    """

    #: Failure reason recorded when a candidate has no file on disk.
    missing_reason: str = "file not found"

    def __init__(self, *, base_path: Path, backup_before_delete: bool, backup_path: str) -> None:
        self._base_path = base_path
        self._backup_before_delete = backup_before_delete
        self._backup_path = backup_path

    @property
    def backup_root(self) -> Path:
        """Absolute backup tree root."""
        return self._base_path / self._backup_path

    @abstractmethod
    def identify(self, candidate: C) -> str:
        """Return the identifier used in failure messages."""

    @abstractmethod
    def backing_files(self, candidate: C) -> list[BackingFile]:
        """Return the candidate's files that currently exist on disk."""

    @abstractmethod
    def size_of(self, candidate: C) -> int:
        """Return the candidate's recorded size in bytes."""

    def delete(self, candidates: Sequence[C], dry_run: bool = False) -> DeletionResult:
        """Delete candidates, backing them up first if configured.

        Args:
            candidates: Candidates to delete.
            dry_run: If True, report what would be deleted without touching
                the filesystem.

        Returns:
            Aggregated DeletionResult for the whole batch.
        """
        deleted = 0
        backed_up = 0
        total_size = 0
        failed: list[str] = []
        backup_dir = self.backup_root / datetime.now().strftime(BACKUP_TIMESTAMP_FORMAT)

        for candidate in candidates:
            identifier = self.identify(candidate)
            files = self.backing_files(candidate)

            if not files:
                failed.append(f"{identifier} ({self.missing_reason})")
                continue

            if not all(self._is_inside_project(backing) for backing in files):
                logger.warning("Refusing to delete %s: outside %s", identifier, self._base_path)
                failed.append(f"{identifier} (outside project root)")
                continue

            if dry_run:
                logger.info("Dry-run: would delete %s", identifier)
                deleted += 1
                total_size += self.size_of(candidate)
                continue

            if self._backup_before_delete:
                copied, backup_error = self._backup_files(files, backup_dir)
                backed_up += copied
                if backup_error is not None:
                    failed.append(f"{identifier} (Failed to create backup: {backup_error})")
                    continue

            delete_error = self._remove_files(files)
            if delete_error is not None:
                failed.append(f"{identifier} ({delete_error})")
                continue

            logger.info("Deleted %s", identifier)
            deleted += 1
            total_size += self.size_of(candidate)

        return DeletionResult(
            deleted=deleted,
            backed_up=backed_up,
            failed=failed,
            total_size=total_size,
        )

    def _is_inside_project(self, backing: BackingFile) -> bool:
        """Check that a file belongs to the project tree.

        Manifest paths must be relative without ``..`` segments, and the
        file's directory must resolve below the project root. The file
        itself may be a symlink; unlinking it only removes the link.
        """
        relative = PurePosixPath(backing.relative_path.replace("\\", "/"))
        if relative.is_absolute() or ".." in relative.parts:
            return False

        try:
            directory = backing.path.parent.resolve()
            root = self._base_path.resolve()
        except OSError:
            return False
        return directory.is_relative_to(root)

    def _backup_files(self, files: list[BackingFile], backup_dir: Path) -> tuple[int, str | None]:
        """Copy files into the backup folder, preserving relative paths.

        Returns:
            Tuple of (files copied, error message or None).
        """
        copied = 0
        for backing in files:
            dest = backup_dir / backing.relative_path
            try:
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(backing.path, dest)
            except OSError as e:
                logger.warning("Backup failed for %s: %s", backing.path, e)
                return copied, str(e)
            copied += 1
        return copied, None

    def _remove_files(self, files: list[BackingFile]) -> str | None:
        """Delete files and prune directories they leave empty.

        Returns:
            Error message for the first failure, or None.
        """
        for backing in files:
            try:
                backing.path.unlink()
            except OSError as e:
                logger.warning("Cannot delete %s: %s", backing.path, e)
                return str(e)
            self._prune_empty_dirs(backing.path.parent)
        return None

    def _prune_empty_dirs(self, directory: Path) -> None:
        """Remove empty directories upward, stopping at the first one to keep.

        A directory is kept when it is outside the project root, is the
        root itself or one of its direct children, or has any entry.
        """
        while True:
            try:
                relative = directory.relative_to(self._base_path)
            except ValueError:
                return

            if len(relative.parts) < 2 or ".." in relative.parts:
                return
            if not directory.is_dir():
                return

            try:
                if any(directory.iterdir()):
                    return
                directory.rmdir()
            except OSError as e:
                logger.debug("Cannot prune directory %s: %s", directory, e)
                return

            logger.debug("Removed empty directory %s", directory)
            directory = directory.parent
