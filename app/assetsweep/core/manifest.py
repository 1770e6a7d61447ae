"""Manifest file I/O shared by both pipelines.

A manifest is a reviewable JSON snapshot of the candidates found to be
unused. Users delete entries they want to keep, then run the clean
operation, which reloads the remaining entries.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# Entry timestamp format, in local time
MODIFIED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_modified_at(timestamp: int | None) -> str | None:
    """Format an epoch timestamp for a manifest entry."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp).strftime(MODIFIED_AT_FORMAT)


def parse_modified_at(value: str | None) -> int | None:
    """Parse a manifest entry timestamp back to epoch seconds.

    Unparseable values (e.g., from hand-edited manifests) yield None.
    """
    if not value:
        return None
    try:
        return int(datetime.strptime(value, MODIFIED_AT_FORMAT).timestamp())
    except ValueError:
        logger.debug("Ignoring unparseable modified_at value: %s", value)
        return None


class ManifestError(Exception):
    """Base exception for manifest-related errors."""


class ManifestNotFoundError(ManifestError):
    """Raised when the manifest file is not found."""


class ManifestParseError(ManifestError):
    """Raised when the manifest file is not valid JSON."""


class ManifestValidationError(ManifestError):
    """Raised when the manifest content does not have the expected structure."""


class ManifestWriteError(ManifestError):
    """Raised when the manifest cannot be encoded or written."""


class ManifestInstructions(BaseModel):
    """Static hints written at the top of every manifest."""

    model_config = ConfigDict(extra="ignore")

    review: str
    delete_entry: str
    clean: str


class ManifestBase(BaseModel):
    """Fields shared by asset and component manifests.

    Attributes:
        generated_at: When the manifest was generated.
        total_scanned: Number of candidates found by the scanner.
        total_unused: Number of entries at generation time.
        total_size: Combined size of the entries in bytes.
        total_size_human: Human-readable form of total_size.
        instructions: Review hints for the user.
    """

    model_config = ConfigDict(extra="ignore")

    generated_at: Annotated[datetime, Field(description="Generation timestamp")]
    total_scanned: Annotated[int, Field(ge=0)] = 0
    total_unused: Annotated[int, Field(ge=0)] = 0
    total_size: Annotated[int, Field(ge=0)] = 0
    total_size_human: str = "0 B"
    instructions: ManifestInstructions


C = TypeVar("C")
M = TypeVar("M", bound=ManifestBase)


class ManifestManager(ABC, Generic[C, M]):
    """Abstract base class for manifest managers.

    Subclasses build the pipeline-specific manifest model from
    candidates and rebuild candidates from a loaded manifest.

    Args:
        manifest_path: Manifest location relative to the project root.
        base_path: Project root directory.
    """

    #: Pydantic model of the manifest file.
    model: type[M]

    def __init__(self, *, manifest_path: str, base_path: Path) -> None:
        self._manifest_path = manifest_path
        self._base_path = base_path

    @property
    def manifest_path(self) -> str:
        """Manifest location relative to the project root."""
        return self._manifest_path

    @property
    def full_path(self) -> Path:
        """Absolute manifest location."""
        return self._base_path / self._manifest_path

    @abstractmethod
    def build(self, candidates: Sequence[C], total_scanned: int) -> M:
        """Create the manifest model for a set of unused candidates."""

    @abstractmethod
    def to_candidates(self, manifest: M) -> list[C]:
        """Rebuild candidates from the entries of a loaded manifest."""

    def generate(self, candidates: Sequence[C], total_scanned: int = 0) -> M:
        """Build and write a manifest, replacing any existing file.

        Args:
            candidates: Unused candidates to record.
            total_scanned: Number of candidates found by the scan.

        Returns:
            The manifest that was written.

        Raises:
            ManifestWriteError: If the manifest cannot be encoded or written.
        """
        manifest = self.build(candidates, total_scanned)
        self._write(manifest)
        logger.info("Wrote manifest with %d entries to %s", len(candidates), self.full_path)
        return manifest

    def read(self) -> M:
        """Load and validate the manifest file.

        Returns:
            Validated manifest model.

        Raises:
            ManifestNotFoundError: If the manifest file doesn't exist.
            ManifestParseError: If the file is not valid JSON.
            ManifestValidationError: If the content doesn't match the schema.
            ManifestError: If the file cannot be read.
        """
        path = self.full_path

        if not path.exists():
            raise ManifestNotFoundError(f"Manifest not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestParseError(f"Invalid JSON in manifest {path}: {e}") from e
        except OSError as e:
            raise ManifestError(f"Failed to read manifest {path}: {e}") from e

        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            raise ManifestValidationError(f"Invalid manifest content in {path}: {e}") from e

    def load(self) -> M | None:
        """Load the manifest, returning None if it is missing or invalid."""
        try:
            return self.read()
        except ManifestNotFoundError:
            return None
        except ManifestError as e:
            logger.warning("%s", e)
            return None

    def get_candidates(self) -> list[C]:
        """Rebuild the candidates listed in the manifest.

        Returns:
            Candidates in manifest order, or an empty list when there is
            no usable manifest.
        """
        manifest = self.load()
        if manifest is None:
            return []
        return self.to_candidates(manifest)

    def exists(self) -> bool:
        """Check if the manifest file exists."""
        return self.full_path.exists()

    def delete(self) -> bool:
        """Delete the manifest file.

        Returns:
            True if a file was removed, False if there was none.
        """
        path = self.full_path
        if not path.exists():
            return False
        path.unlink()
        logger.info("Removed manifest %s", path)
        return True

    def _write(self, manifest: M) -> None:
        """Write the manifest atomically as pretty-printed JSON."""
        try:
            text = json.dumps(manifest.model_dump(mode="json"), indent=4, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ManifestWriteError(f"Failed to encode manifest to JSON: {e}") from e

        path = self.full_path
        path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                f.write(text)
            os.replace(str(tmp_path), str(path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise ManifestWriteError(f"Failed to write manifest {path}: {e}") from e
