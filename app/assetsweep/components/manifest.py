"""Manifest of unused Blade components."""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from assetsweep.components.models import BladeComponent
from assetsweep.core.manifest import ManifestBase, ManifestInstructions, ManifestManager
from assetsweep.utils.sizes import human_file_size

logger = logging.getLogger(__name__)

COMPONENT_INSTRUCTIONS = ManifestInstructions(
    review="Review the components below and remove any that are actually used.",
    delete_entry='Remove the entry from the "components" array to keep the component.',
    clean="Run `assetsweep components clean` to delete remaining components.",
)


class ComponentEntry(BaseModel):
    """One unused component as stored in the manifest."""

    model_config = ConfigDict(extra="ignore")

    name: str
    view_path: str | None = None
    is_class_based: bool = False
    class_path: str | None = None
    class_name: str | None = None
    size: Annotated[int, Field(ge=0)] = 0
    size_human: str = ""
    modified_at: str | None = None


class ComponentManifest(ManifestBase):
    """Manifest file listing unused Blade components."""

    components: Annotated[list[ComponentEntry], Field(default_factory=list)]


class ComponentManifestManager(ManifestManager[BladeComponent, ComponentManifest]):
    """Reads and writes the component manifest."""

    model = ComponentManifest

    def build(
        self,
        candidates: Sequence[BladeComponent],
        total_scanned: int,
    ) -> ComponentManifest:
        total_size = sum(component.total_size for component in candidates)
        return ComponentManifest(
            generated_at=datetime.now(UTC).astimezone(),
            total_scanned=total_scanned,
            total_unused=len(candidates),
            total_size=total_size,
            total_size_human=human_file_size(total_size),
            instructions=COMPONENT_INSTRUCTIONS,
            components=[ComponentEntry.model_validate(c.to_manifest_entry()) for c in candidates],
        )

    def to_candidates(self, manifest: ComponentManifest) -> list[BladeComponent]:
        components: list[BladeComponent] = []
        for entry in manifest.components:
            try:
                components.append(BladeComponent.from_manifest(entry.model_dump(), self._base_path))
            except ValueError as e:
                logger.warning("Skipping manifest entry %s: %s", entry.name, e)
        return components
