"""Deletion of unused Blade components."""

from assetsweep.components.models import BladeComponent
from assetsweep.core.operator import BackingFile, DeletionOperator


class ComponentOperator(DeletionOperator[BladeComponent]):
    """Backs up and deletes component files.

    A component is removed as a unit: its view file first, then its
    class file. Only files that currently exist are touched.
    """

    missing_reason = "no files found"

    def identify(self, candidate: BladeComponent) -> str:
        return candidate.name

    def backing_files(self, candidate: BladeComponent) -> list[BackingFile]:
        files: list[BackingFile] = []

        if candidate.view_path is not None and candidate.view_path.is_file():
            files.append(
                BackingFile(
                    path=candidate.view_path,
                    relative_path=candidate.view_relative_path or candidate.view_path.name,
                )
            )

        if (
            candidate.is_class_based
            and candidate.class_path is not None
            and candidate.class_path.is_file()
        ):
            files.append(
                BackingFile(
                    path=candidate.class_path,
                    relative_path=candidate.class_relative_path or candidate.class_path.name,
                )
            )

        return files

    def size_of(self, candidate: BladeComponent) -> int:
        return candidate.total_size
